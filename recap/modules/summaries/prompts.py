from langchain_core.prompts import ChatPromptTemplate

system_directive = (
    "You are an AI assistant that summarizes meeting transcripts faithfully. "
    "Preserve every decision and action item that was discussed. "
    "You must not fabricate content that is not present in the transcript."
)

default_instruction = "Produce a bulleted summary highlighting decisions, action items, and next steps."

# the instruction and the transcript are template variables, so braces in either are kept verbatim
summary_prompt = ChatPromptTemplate(
    [
        ('system', system_directive),
        ('human', '{instruction}\n\nTranscript:\n{transcript}'),
    ]
)

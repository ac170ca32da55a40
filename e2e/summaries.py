from recap.logs import get_logger

from .common import get, modules, post, recipients

log = get_logger(__name__)

transcript = '''
Anna: Morning everyone, let's go through the launch checklist.
John: The release branch is cut. QA found two blockers, both fixed yesterday.
Sarah: I still need the final changelog from the backend team.
John: I'll send it over by noon today.
Anna: Great. Then we ship on Friday. Sarah, can you write the release notes?
Sarah: Yes, I'll have a draft ready on Thursday.
Anna: Let's also schedule a retro for next Tuesday.
'''


async def ping():
    resp = await get('api/ping')
    assert resp.status == 200, log.error(f'Unexpected status code: {resp.status}')


async def generate_summary():
    resp = await post('api/generate-summary', {'transcript': transcript, 'customPrompt': ''})
    result = await resp.json()

    assert resp.status == 200, log.error(f'Unexpected status code: {resp.status}, {result}')
    assert result.get('summary'), log.error(f'Empty summary: {result}')

    return result['summary']


async def generate_summary_without_transcript():
    resp = await post('api/generate-summary', {'transcript': '  ', 'customPrompt': ''})
    assert resp.status == 400, log.error(f'Unexpected status code: {resp.status}')


async def share_summary(summary):
    resp = await post('api/share-summary', {'summary': summary, 'recipients': recipients})
    result = await resp.json()

    # the provider may be in testing mode, which is still a well formed answer
    assert resp.status in (200, 403), log.error(f'Unexpected status code: {resp.status}, {result}')
    log.info(f'Share result: {result}')


async def run():
    log.info('#### Running summaries e2e tests')

    log.info('GET api/ping')
    await ping()

    log.info('POST api/generate-summary - summarize a transcript with the default instruction')
    summary = await generate_summary()
    log.info(f'Summary: {summary}')

    log.info('POST api/generate-summary - blank transcript is rejected')
    await generate_summary_without_transcript()

    if 'sharing' in modules and recipients:
        log.info('POST api/share-summary - email the summary')
        await share_summary(summary)

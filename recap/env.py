import os

from dotenv import load_dotenv

load_dotenv()


# utilities
def tobool(val: str | None):
    if val is None:
        return False
    val = val.lower().strip()
    if val in ['y', 'yes', 'true', '1']:
        return True
    return False


def toint(val: str | None, default: int | None = None):
    if val is None or not val.strip():
        return default
    return int(val)


# general
app_port = int(os.environ.get('RECAP_PORT', 8000))
log_level = os.environ.get('LOG_LEVEL', 'INFO').strip().upper()
supported_modules = {'summaries', 'sharing'}
enabled_modules = set(os.environ.get('ENABLED_MODULES', 'summaries,sharing').split(','))
modules = supported_modules.intersection(enabled_modules)
ping_message = os.environ.get('PING_MESSAGE', 'ping')
max_body_size_bytes = int(os.environ.get('MAX_BODY_SIZE_BYTES', 10 * 1024 * 1024))  # 10mb, transcripts can be long

# providers
provider_timeout = int(os.environ.get('PROVIDER_TIMEOUT', 60))
provider_retry_attempts = int(os.environ.get('PROVIDER_RETRY_ATTEMPTS', 1))

# openai
# credentials are optional at startup, a missing key is reported when a summary is requested
openai_api_key = os.environ.get('OPENAI_API_KEY')
openai_api_base_url = os.environ.get('OPENAI_API_BASE_URL')
openai_model = os.environ.get('OPENAI_MODEL', 'gpt-4o-mini')
openai_temperature = float(os.environ.get('OPENAI_TEMPERATURE', 0.3))
openai_max_completion_tokens = toint(os.environ.get('OPENAI_MAX_COMPLETION_TOKENS'))

# resend
resend_api_key = os.environ.get('RESEND_API_KEY')
resend_api_base_url = os.environ.get('RESEND_API_BASE_URL', 'https://api.resend.com').rstrip('/')
email_from = os.environ.get('EMAIL_FROM', 'Meeting Recap <onboarding@resend.dev>')
email_subject = os.environ.get('EMAIL_SUBJECT', 'Meeting Summary')

# monitoring
enable_metrics = tobool(os.environ.get('ENABLE_METRICS', 'true'))
metrics_port = int(os.environ.get('METRICS_PORT', 8001))

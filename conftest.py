import os

# recap.env reads the environment once, on first import
os.environ.setdefault('OPENAI_API_KEY', 'test-openai-key')
os.environ.setdefault('RESEND_API_KEY', 'test-resend-key')
os.environ['ENABLE_METRICS'] = 'false'
os.environ['PROVIDER_RETRY_ATTEMPTS'] = '1'

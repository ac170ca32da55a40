import logging

from recap.logs import AccessLogSuppressor, EmailRedactor


def make_record(msg, *args):
    return logging.LogRecord('test', logging.INFO, __file__, 1, msg, args, None)


class TestEmailRedactor:
    def test_addresses_are_redacted(self):
        record = make_record('Sharing failed: only send testing emails to your own email address (%s)', 'me@x.co.uk')

        assert EmailRedactor().filter(record)
        assert record.getMessage() == 'Sharing failed: only send testing emails to your own email address (<redacted>)'

    def test_other_messages_are_untouched(self):
        record = make_record('Summary generated in %.2fs', 1.5)

        assert EmailRedactor().filter(record)
        assert record.args == (1.5,)
        assert record.getMessage() == 'Summary generated in 1.50s'


class TestAccessLogSuppressor:
    def test_health_checks_are_suppressed(self):
        assert not AccessLogSuppressor().filter(make_record('"GET /healthz HTTP/1.1" 200'))
        assert AccessLogSuppressor().filter(make_record('"POST /api/generate-summary HTTP/1.1" 200'))

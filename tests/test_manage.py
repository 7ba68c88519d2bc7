import logging

import manage
from contentforge.utils.logging_utils import setup_logging
from tests.conftest import FakeResponse


def test_truncate_logs_keeps_tail(tmp_path):
    log_file = tmp_path / 'app.log'
    log_file.write_text("".join(f"line {i}\n" for i in range(10)), encoding='utf-8')

    manage.truncate_logs(tmp_path, keep_lines=3)

    assert log_file.read_text(encoding='utf-8') == "line 7\nline 8\nline 9\n"


def test_check_health_prints_report(monkeypatch, capsys):
    payload = {
        'status': 'healthy',
        'timestamp': '2025-01-01T00:00:00',
        'version': '1.0.0',
        'database': {'connected': True, 'articles_count': 4, 'job_postings_count': 1, 'news_summaries_count': 2},
        'config': {'openai_api_configured': True, 'news_api_configured': False, 'huggingface_configured': False},
    }

    class Response(FakeResponse):
        def raise_for_status(self):
            pass

    monkeypatch.setattr(manage.requests, 'get', lambda url, timeout=None: Response(payload))

    assert manage.check_health("http://svc") is True
    out = capsys.readouterr().out
    assert "Status: HEALTHY" in out
    assert "Articles: 4" in out


def test_setup_logging_writes_rotating_files(tmp_path, app):
    loggers = setup_logging(app, log_level=logging.DEBUG, log_dir=str(tmp_path))

    logging.getLogger('contentforge.external.completion').info("external call")
    loggers['app_logger'].info("app event")
    for handler in loggers['app_logger'].handlers + loggers['external_logger'].handlers:
        handler.flush()

    assert "external call" in (tmp_path / 'external.log').read_text()
    assert "app event" in (tmp_path / 'app.log').read_text()
    assert app.logger.handlers

    for logger in (loggers['app_logger'], loggers['external_logger'], app.logger):
        for handler in logger.handlers:
            handler.close()
        logger.handlers = []

import pytest

from nayukicore.logger import Logger, LoggerCategory, LoggerCategoryError, LoggerType


@pytest.fixture
def registry(tmp_path):
    logger = Logger(tmp_path)
    yield logger
    logger.close()


def test_sync_name_needs_log_prefix(registry):
    with pytest.raises(LoggerCategoryError):
        LoggerCategory("Core", LoggerType.SYNC, registry)


def test_async_name_needs_alog_prefix(registry):
    with pytest.raises(LoggerCategoryError):
        LoggerCategory("LogCore", LoggerType.ASYNC, registry)


def test_rejected_category_is_not_registered(tmp_path, registry):
    with pytest.raises(LoggerCategoryError):
        LoggerCategory("Bad", LoggerType.SYNC, registry)
    assert list(tmp_path.iterdir()) == []


def test_sync_category_creates_truncated_log_file(tmp_path, registry):
    (tmp_path / "LogCore.log").write_text("old content")
    category = LoggerCategory("LogCore", LoggerType.SYNC, registry)
    logger = registry.get(category)
    assert logger is not None
    assert logger.name == "LogCore"
    assert "old content" not in (tmp_path / "LogCore.log").read_text()


def test_debug_goes_to_file_only(tmp_path, registry, capsys):
    category = LoggerCategory("LogQuiet", LoggerType.SYNC, registry)
    registry.get(category).debug("hidden detail")
    registry.close()
    assert "hidden detail" in (tmp_path / "LogQuiet.log").read_text()
    assert "hidden detail" not in capsys.readouterr().out


def test_warning_goes_to_console_and_file(tmp_path, registry, capsys):
    category = LoggerCategory("LogLoud", LoggerType.SYNC, registry)
    registry.get(category).warning("visible problem")
    registry.close()
    assert "visible problem" in capsys.readouterr().out
    assert "visible problem" in (tmp_path / "LogLoud.log").read_text()


def test_async_category_writes_alog_file(tmp_path, registry):
    category = LoggerCategory("ALogWorker", LoggerType.ASYNC, registry)
    assert category.logger_type is LoggerType.ASYNC
    logger = registry.get(category)
    assert logger.name == "ALogWorker"
    logger.info("queued message")
    registry.close()
    assert registry.get(category) is None
    assert "queued message" in (tmp_path / "ALogWorker.alog").read_text()


def test_duplicate_registration_reports_and_keeps_logger(registry, capsys):
    first = LoggerCategory("LogDup", LoggerType.SYNC, registry)
    original = registry.get(first)
    second = LoggerCategory("LogDup", LoggerType.SYNC, registry)
    assert registry.get(second) is original
    err = capsys.readouterr().err
    assert "LogDup" in err
    assert "duplication register" in err


def test_unknown_category_returns_none(tmp_path):
    other = Logger(tmp_path / "other")
    category = LoggerCategory("LogElsewhere", LoggerType.SYNC, other)
    fresh = Logger(tmp_path)
    assert fresh.get(category) is None
    other.close()


def test_close_forgets_categories(registry):
    category = LoggerCategory("LogGone", LoggerType.SYNC, registry)
    registry.close()
    assert registry.get(category) is None


def test_category_equality(registry):
    a = LoggerCategory("LogSame", LoggerType.SYNC, registry)
    b = LoggerCategory("LogSame", LoggerType.SYNC, registry)
    c = LoggerCategory("LogOther", LoggerType.SYNC, registry)
    assert a == b
    assert hash(a) == hash(b)
    assert not (a == c)
    assert a.name == "LogSame"
    assert a.logger_type is LoggerType.SYNC
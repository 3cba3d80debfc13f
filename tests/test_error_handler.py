from bloomguard.error_handler import ErrorHandler, ErrorType


def test_classify_errors():
    handler = ErrorHandler()
    assert handler.classify_error(FileNotFoundError("x")) == ErrorType.FILE_NOT_FOUND
    assert handler.classify_error(PermissionError("x")) == ErrorType.PERMISSION_DENIED
    assert handler.classify_error(IsADirectoryError("x")) == ErrorType.IS_A_DIRECTORY
    assert handler.classify_error(UnicodeDecodeError("utf-8", b"\xff", 0, 1, "bad")) == ErrorType.DECODE_ERROR
    assert handler.classify_error(OSError("disk")) == ErrorType.IO_ERROR
    assert handler.classify_error(RuntimeError("?")) == ErrorType.UNKNOWN_ERROR


def test_summary():
    handler = ErrorHandler()
    assert handler.get_error_summary() == {"total_errors": 0}
    assert handler.last_error() is None

    handler.record(FileNotFoundError("gone"), "a.csv", "load_corpus")
    handler.record(PermissionError("denied"), "b.txt", "screen_file")
    handler.record(FileNotFoundError("gone"), "a.csv", "load_corpus")

    summary = handler.get_error_summary()
    assert summary["total_errors"] == 3
    assert summary["failed_sources"] == 2
    assert summary["error_types"] == {"file_not_found": 2, "permission_denied": 1}
    assert summary["operation_errors"] == {"load_corpus": 2, "screen_file": 1}
    assert handler.last_error().source == "a.csv"

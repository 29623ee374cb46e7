from unittest.mock import MagicMock

import pytest

from logfacade.meta.errors import keep_meta
from logfacade.models import EMPTY_MESSAGE
from logfacade.sinks import MemorySink

FILENAME = "app/service.py"


def last_entry(sink):
    assert sink.entries, "nothing was logged"
    return sink.entries[-1]


class TestLoggerBasics:

    def test_no_args_is_noop(self, make_logger, sink):
        logger = make_logger()

        logger.log("info")
        logger.info()

        assert sink.entries == []

    def test_plain_message_gets_filename(self, make_logger, sink):
        logger = make_logger()

        logger.info("hello")

        entry = last_entry(sink)
        assert entry.level == "info"
        assert entry.message == "hello"
        assert entry.meta == {"filename": FILENAME}

    def test_meta_and_template(self, make_logger, sink):
        logger = make_logger()

        logger.info({"a": 1}, "id=%s", 5)

        entry = last_entry(sink)
        assert entry.message == "id=5"
        assert entry.meta == {"a": 1, "filename": FILENAME}

    def test_meta_only_uses_placeholder_message(self, make_logger, sink):
        logger = make_logger()

        logger.info({"a": 1})

        assert last_entry(sink).message == EMPTY_MESSAGE

    def test_unclassifiable_args_are_rendered(self, make_logger, sink):
        logger = make_logger()

        logger.warn(1, 2)

        entry = last_entry(sink)
        assert entry.level == "warn"
        assert entry.message == "1,2"

    @pytest.mark.parametrize("method", ["error", "warn", "info", "verbose", "debug", "silly"])
    def test_level_shortcuts(self, make_logger, sink, method):
        logger = make_logger()

        getattr(logger, method)("hi")

        assert last_entry(sink).level == method

    def test_callback_receives_record(self, make_logger, sink):
        logger = make_logger()
        callback = MagicMock()

        logger.info("hello", callback)

        callback.assert_called_once_with(None, "info", "hello", {"filename": FILENAME})

    def test_caller_meta_is_not_modified(self, make_logger, sink):
        logger = make_logger()
        meta = {"a": 1}

        logger.info(meta, "hello")

        assert meta == {"a": 1}


class TestMetaAliases:

    def test_filename_under_alias(self, make_logger, sink):
        logger = make_logger(metaAliases={"filename": "sourceFile"})

        logger.info({"a": 1}, "hello")

        assert last_entry(sink).meta == {"a": 1, "sourceFile": FILENAME}

    def test_existing_key_is_not_overwritten(self, make_logger, sink):
        logger = make_logger()

        logger.info({"filename": "upload.csv"}, "received")

        assert last_entry(sink).meta == {"filename": "upload.csv"}

    def test_alias_disabled(self, make_logger, sink):
        logger = make_logger(meta_aliases={"filename": None})

        logger.info("hello")

        assert last_entry(sink).meta is None


class TestErrors:

    def test_error_alone(self, make_logger, sink):
        logger = make_logger()

        logger.error(ValueError("boom"))

        entry = last_entry(sink)
        assert entry.message == "boom"
        assert entry.meta["errorName"] == "ValueError"
        assert entry.meta["errorStack"] == "ValueError: boom"

    def test_error_with_message_uses_connector(self, make_logger, sink):
        logger = make_logger()

        logger.error(ValueError("boom"), "save %s failed", "doc-1")

        assert last_entry(sink).message == "save doc-1 failed && boom"

    def test_custom_connector(self, make_logger, sink):
        logger = make_logger(MESSAGE_CONNECTOR=" | ")

        logger.error(ValueError("boom"), "failed")

        assert last_entry(sink).message == "failed | boom"

    def test_first_error_wins(self, make_logger, sink):
        logger = make_logger()

        logger.error(ValueError("first"), TypeError("second"), "msg")

        entry = last_entry(sink)
        assert entry.message == "msg && first"
        assert entry.meta["errorName"] == "ValueError"

    def test_meta_wins_over_error_meta(self, make_logger, sink):
        logger = make_logger()
        error = ValueError("boom")
        error.meta = {"a": "error", "b": "error"}

        logger.error({"a": "meta"}, error)

        meta = last_entry(sink).meta
        assert meta["a"] == "meta"
        assert meta["b"] == "error"

    def test_error_meta_with_non_string_keys(self, make_logger, sink):
        logger = make_logger()
        error = ValueError("boom")
        error.meta = {1: "x", "a": 2}

        logger.error(error)

        entry = last_entry(sink)
        assert entry.message == "boom"
        assert entry.meta[1] == "x"
        assert entry.meta["a"] == 2

    def test_error_without_message_uses_placeholder(self, make_logger, sink):
        logger = make_logger()

        logger.error(ValueError())

        assert last_entry(sink).message == EMPTY_MESSAGE

    def test_hook_replaces_meta(self, make_logger, sink):
        hook = MagicMock(return_value={"custom": True})
        logger = make_logger(modifyMetaWhenLogError=hook)
        error = ValueError("boom")
        meta = {"a": 1}

        logger.error(meta, error)

        hook.assert_called_once_with(error, meta)
        assert last_entry(sink).meta == {"custom": True, "filename": FILENAME}

    def test_hook_falsy_result_keeps_meta(self, make_logger, sink):
        logger = make_logger(modify_meta_when_log_error=lambda error, meta: None)

        logger.error({"a": 1}, ValueError("boom"))

        assert last_entry(sink).meta == {"a": 1, "filename": FILENAME}

    def test_identity_hook(self, make_logger, sink):
        logger = make_logger(modify_meta_when_log_error=keep_meta)

        logger.error(ValueError("boom"))

        assert last_entry(sink).meta == {"filename": FILENAME}


class TestProductionMode:

    def test_mask_applied_in_production(self, make_logger, sink):
        logger = make_logger(production=True)
        meta = {"password": "p", "user": "ann", "$mask": ["password"]}

        logger.info(meta, "login")

        assert last_entry(sink).meta == {
            "password": "[secret String]",
            "user": "ann",
            "filename": FILENAME,
        }
        assert meta["password"] == "p"

    def test_rewriter_applied_in_production(self, make_logger, sink):
        logger = make_logger(production=True)

        logger.info({"a": 1, "$rewriter": lambda m: {"b": m["a"] + 1}}, "rewritten")

        assert last_entry(sink).meta == {"b": 2, "filename": FILENAME}

    def test_error_meta_is_masked(self, make_logger, sink):
        logger = make_logger(production=True)
        error = ValueError("boom")
        error.meta = {"token": "t"}

        logger.error({"$mask": "token"}, error)

        meta = last_entry(sink).meta
        assert meta["token"] == "[secret String]"
        assert "$mask" not in meta

    def test_directives_pass_through_outside_production(self, make_logger, sink):
        logger = make_logger(production=False)

        logger.info({"password": "p", "$mask": ["password"]}, "login")

        meta = last_entry(sink).meta
        assert meta["password"] == "p"
        assert meta["$mask"] == ["password"]

    def test_rewriter_errors_propagate(self, make_logger, sink):
        logger = make_logger(production=True)

        def broken(meta):
            raise RuntimeError("rewriter exploded")

        with pytest.raises(RuntimeError, match="rewriter exploded"):
            logger.info({"$rewriter": broken}, "hello")
        assert sink.entries == []


class TestExplicitApi:

    def test_emit_with_named_parts(self, make_logger, sink):
        logger = make_logger()
        callback = MagicMock()

        logger.emit(
            "warn",
            "disk at %d%%",
            params=[93],
            meta={"host": "db-1"},
            callback=callback,
        )

        entry = last_entry(sink)
        assert entry.message == "disk at 93%"
        assert entry.meta == {"host": "db-1", "filename": FILENAME}
        callback.assert_called_once()

    def test_emit_with_error_only(self, make_logger, sink):
        logger = make_logger()

        logger.emit("error", error=ValueError("boom"))

        assert last_entry(sink).message == "boom"

    def test_emit_without_anything(self, make_logger, sink):
        logger = make_logger()

        logger.emit("info")

        assert last_entry(sink).message == EMPTY_MESSAGE


class TestRewritersAndSink:

    def test_rewriters_run_in_order(self, make_logger, sink):
        calls = []

        def first(level, message, meta):
            calls.append("first")
            return {**(meta or {}), "level": level}

        def second(level, message, meta):
            calls.append("second")
            return {**meta, "length": len(message)}

        logger = make_logger(rewriters=[first, second])

        logger.info("hello")

        assert calls == ["first", "second"]
        assert last_entry(sink).meta == {"level": "info", "length": 5, "filename": FILENAME}

    def test_filters_rewrite_message_after_rewriters(self, make_logger, sink):
        def tag(level, message, meta):
            return f"[{meta['service']}] {message}"

        def shout(level, message, meta):
            return message.upper() if level == "error" else message

        logger = make_logger(
            rewriters=[lambda level, message, meta: {**(meta or {}), "service": "api"}],
            filters=[tag, shout],
        )
        callback = MagicMock()

        logger.error("failed", callback)

        entry = last_entry(sink)
        assert entry.message == "[API] FAILED"
        assert entry.meta == {"service": "api", "filename": FILENAME}
        callback.assert_called_once_with(None, "error", "[API] FAILED", entry.meta)

    def test_sink_threshold(self, make_logger):
        quiet = MemorySink(level="warn")
        logger = make_logger(sink=quiet)
        callback = MagicMock()

        logger.info("dropped", callback)
        logger.error("kept")

        assert [entry.message for entry in quiet.entries] == ["kept"]
        callback.assert_called_once()

    def test_query_and_stream_passthrough(self, make_logger, sink):
        logger = make_logger()
        logger.info("one")
        logger.warn("two")

        assert [e.message for e in logger.query({"level": "warn"})] == ["two"]
        assert [e.message for e in logger.stream({"start": 1})] == ["two"]

    def test_profile_passthrough(self, make_logger, sink):
        logger = make_logger()

        assert logger.profile("import") is logger
        logger.profile("import")

        entry = last_entry(sink)
        assert entry.message == "import"
        assert entry.meta["durationMs"] >= 0

"""
Tests for structured diagnostic logging
"""

import json
import logging
from decimal import Decimal

from simple_bank.audit import InMemoryTransactionLogger
from simple_bank.logging_config import (
    JSONFormatter, get_logger, log_action, setup_logging
)
from simple_bank.service import BankService
from simple_bank.storage import InMemoryAccountRepository


class ListHandler(logging.Handler):
    """Collects emitted records"""

    def __init__(self):
        super().__init__()
        self.records = []

    def emit(self, record):
        self.records.append(record)


class TestJSONFormatter:
    """Test JSON rendering"""

    def test_format_includes_structured_fields(self):
        """Test that action, resource and extra are emitted"""
        record = logging.LogRecord("simple_bank.test", logging.INFO, __file__, 1, "hello", (), None)
        record.action = "deposit"
        record.resource = "account:A1"
        record.extra = {"amount": Decimal('5')}

        entry = json.loads(JSONFormatter().format(record))
        assert entry["level"] == "INFO"
        assert entry["logger"] == "simple_bank.test"
        assert entry["message"] == "hello"
        assert entry["action"] == "deposit"
        assert entry["resource"] == "account:A1"
        assert entry["extra"] == {"amount": "5"}
        assert "timestamp" in entry

    def test_format_drops_missing_fields(self):
        """Test that absent fields are left out"""
        record = logging.LogRecord("simple_bank.test", logging.WARNING, __file__, 1, "plain", (), None)
        entry = json.loads(JSONFormatter().format(record))
        assert "action" not in entry
        assert "extra" not in entry


class TestSetupLogging:
    """Test logger configuration"""

    def test_json_handler(self):
        """Test default JSON setup"""
        logger = setup_logging("DEBUG", logger_name="simple_bank.test_json")
        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == 1
        assert isinstance(logger.handlers[0].formatter, JSONFormatter)
        assert logger.propagate is False

    def test_repeated_setup_does_not_duplicate_handlers(self):
        """Test that setup replaces old handlers"""
        setup_logging("INFO", logger_name="simple_bank.test_dup")
        logger = setup_logging("INFO", logger_name="simple_bank.test_dup")
        assert len(logger.handlers) == 1

    def test_text_format_to_file(self, tmp_path):
        """Test plain-text logging to a file"""
        log_file = tmp_path / "bank.log"
        logger = setup_logging("INFO", logger_name="simple_bank.test_file",
                               log_format="text", log_file=str(log_file))
        logger.info("written")
        for handler in logger.handlers:
            handler.flush()

        content = log_file.read_text(encoding="utf-8")
        assert "INFO simple_bank.test_file: written" in content
        setup_logging("INFO", logger_name="simple_bank.test_file")


class TestLogAction:
    """Test structured action logging"""

    def setup_method(self):
        """Set up test fixtures"""
        self.handler = ListHandler()

    def test_log_action_attaches_fields(self):
        """Test that action fields land on the record"""
        logger = get_logger("simple_bank.test_action")
        logger.setLevel(logging.INFO)
        logger.addHandler(self.handler)
        try:
            log_action(logger, "info", "did it", action="act", resource="res", extra={"k": "v"})
        finally:
            logger.removeHandler(self.handler)

        record = self.handler.records[0]
        assert record.getMessage() == "did it"
        assert record.action == "act"
        assert record.resource == "res"
        assert record.extra == {"k": "v"}

    def test_log_action_respects_level(self):
        """Test that disabled levels emit nothing"""
        logger = get_logger("simple_bank.test_level")
        logger.setLevel(logging.WARNING)
        logger.addHandler(self.handler)
        try:
            log_action(logger, "info", "quiet")
        finally:
            logger.removeHandler(self.handler)

        assert self.handler.records == []

    def test_service_emits_diagnostics(self):
        """Test that the bank service logs completed and rejected operations"""
        logger = get_logger("simple_bank.service")
        old_level = logger.level
        logger.setLevel(logging.INFO)
        logger.addHandler(self.handler)
        try:
            service = BankService(InMemoryAccountRepository(), InMemoryTransactionLogger())
            service.create_account("A1", "Alice", Decimal('10'))
            service.withdraw("A1", Decimal('50'))
        finally:
            logger.removeHandler(self.handler)
            logger.setLevel(old_level)

        actions = [(r.action, r.getMessage()) for r in self.handler.records]
        assert ("create_account", "Account created") in actions
        assert ("withdraw", "Withdrawal rejected: insufficient funds") in actions

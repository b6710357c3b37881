import logging
import unittest

from logfactory.adapters import ContextLogger


class ListHandler(logging.Handler):
    """Simple handler that stores received LogRecord objects."""

    def __init__(self):
        super().__init__()
        self.records = []

    def emit(self, record):
        self.records.append(record)


class TestContextLogger(unittest.TestCase):
    def setUp(self):
        self.logger = logging.getLogger("test.logfactory.adapters")
        self.logger.setLevel(logging.DEBUG)
        self.lh = ListHandler()
        self.logger.addHandler(self.lh)

    def tearDown(self):
        self.logger.removeHandler(self.lh)

    def test_context_travels_on_record(self):
        handle = ContextLogger(self.logger)
        handle.add_context("class_name", "Foo")
        handle.info("msg", extra={"step": "prepare"})

        self.assertEqual(len(self.lh.records), 1)
        rec = self.lh.records[0]
        self.assertEqual(rec.context, {"class_name": "Foo"})
        self.assertEqual(rec.step, "prepare")

    def test_handles_for_same_category_are_independent(self):
        a = ContextLogger(self.logger, {"class_name": "A"})
        b = ContextLogger(self.logger)
        a.info("one")
        b.info("two")
        self.assertEqual(self.lh.records[0].context, {"class_name": "A"})
        self.assertEqual(self.lh.records[1].context, {})

    def test_remove_and_clear(self):
        handle = ContextLogger(self.logger, {"class_name": "A", "func_name": "f"})
        handle.remove_context("func_name")
        self.assertEqual(handle.context, {"class_name": "A"})
        handle.remove_context("missing")
        handle.clear_context()
        self.assertEqual(handle.context, {})

    def test_context_property_is_a_copy(self):
        handle = ContextLogger(self.logger, {"class_name": "A"})
        handle.context["class_name"] = "B"
        self.assertEqual(handle.context, {"class_name": "A"})

    def test_record_context_is_snapshot(self):
        handle = ContextLogger(self.logger, {"func_name": "f"})
        handle.info("first")
        handle.add_context("class_name", "C")
        self.assertEqual(self.lh.records[0].context, {"func_name": "f"})

    def test_category(self):
        self.assertEqual(
            ContextLogger(self.logger).category, "test.logfactory.adapters"
        )


if __name__ == "__main__":
    unittest.main()

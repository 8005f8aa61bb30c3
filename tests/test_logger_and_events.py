# tests/test_logger_and_events.py
import io

from tests.fixtures import SortTestBase
from chestsort.core.event_system import EventSystem
from chestsort.utils.logger import Logger, LogLevel

class TestLogger(SortTestBase):

    def test_line_format(self):
        Logger.warning("Sorter", "something odd")
        line = self.log_stream.getvalue().strip().splitlines()[-1]
        self.assertRegex(line, r"^\[\d{2}:\d{2}:\d{2}\] \[WARN \] \[Sorter\] something odd$")

    def test_level_filters_output(self):
        Logger.set_level(LogLevel.ERROR)
        Logger.info("Test", "hidden")
        Logger.error("Test", "shown")
        output = self.log_stream.getvalue()
        self.assertNotIn("hidden", output)
        self.assertIn("[ERROR] [Test] shown", output)

    def test_silent_suppresses_everything(self):
        Logger.set_level(LogLevel.SILENT)
        Logger.critical("Test", "nothing")
        self.assertEqual(self.log_stream.getvalue(), "")

    def test_exception_includes_traceback(self):
        try:
            raise KeyError("missing")
        except KeyError:
            Logger.exception("Test", "lookup failed")
        self.assertLogContains("lookup failed")
        self.assertLogContains("KeyError: 'missing'")

    def test_singleton(self):
        self.assertIs(Logger(), Logger())

    def test_stream_can_be_swapped(self):
        other = io.StringIO()
        Logger.set_stream(other)
        Logger.info("Test", "elsewhere")
        self.assertIn("elsewhere", other.getvalue())
        self.assertNotIn("elsewhere", self.log_stream.getvalue())


class TestEventSystem(SortTestBase):

    def setUp(self):
        super().setUp()
        self.events = EventSystem()
        self.received = []

    def record(self, event_type, data):
        self.received.append((event_type, data))

    def test_publish_reaches_subscribers(self):
        self.events.subscribe("sort.started", self.record)
        self.events.subscribe("sort.started", self.record) # duplicate ignored
        self.events.publish("sort.started", {"size": 27})
        self.assertEqual(self.received, [("sort.started", {"size": 27})])

    def test_unsubscribe(self):
        self.events.subscribe("sort.failed", self.record)
        self.events.unsubscribe("sort.failed", self.record)
        self.events.publish("sort.failed", None)
        self.assertEqual(self.received, [])
        self.assertNotIn("sort.failed", self.events.subscribers)

    def test_history(self):
        self.events.publish("sort.aborted", "first")
        self.events.publish("sort.aborted", "second")
        self.assertEqual(self.events.get_last_event_data("sort.aborted"), "second")
        self.events.clear_history({"sort.aborted"})
        self.assertEqual(self.events.get_last_event_data("sort.aborted", "none"), "none")

    def test_subscriber_error_is_isolated(self):
        def broken(event_type, data):
            raise ValueError("bad listener")

        self.events.subscribe("sort.succeeded", broken)
        self.events.subscribe("sort.succeeded", self.record)
        self.events.publish("sort.succeeded", 1)
        self.assertEqual(self.received, [("sort.succeeded", 1)])
        self.assertLogContains("bad listener")

"""Tests for the EventBus and apply event types."""

from paramstyle.events import EventBus, EventRecorder, ParamApplied, ParamFailed, SheetApplied


class TestEventBus:
    def test_subscribe_exact_type(self):
        bus = EventBus()
        seen = []
        bus.subscribe(ParamApplied, seen.append)
        applied = ParamApplied("h", "Act.Gain", "1.0", "2.0", "Layer")
        bus.emit(applied)
        bus.emit(ParamFailed("h", "Nope", "no field", "Layer"))
        assert seen == [applied]

    def test_catch_all_runs_first(self):
        bus = EventBus()
        order = []
        bus.subscribe(SheetApplied, lambda e: order.append("typed"))
        bus.on_all(lambda e: order.append("all"))
        bus.emit(SheetApplied("h", True, 1, 0))
        assert order == ["all", "typed"]

    def test_no_listeners(self):
        EventBus().emit(SheetApplied("h", False, 0, 0))

    def test_listeners_in_registration_order(self):
        bus = EventBus()
        order = []
        bus.subscribe(ParamFailed, lambda e: order.append(1))
        bus.subscribe(ParamFailed, lambda e: order.append(2))
        bus.emit(ParamFailed("h", "x", "bad", "L"))
        assert order == [1, 2]


class TestEventRecorder:
    def test_records_everything(self):
        bus = EventBus()
        recorder = EventRecorder(bus)
        bus.emit(ParamFailed("h", "x", "bad", "L"))
        bus.emit(SheetApplied("h", False, 0, 1))
        assert len(recorder.events) == 2
        assert len(recorder.of_type(SheetApplied)) == 1

    def test_unattached(self):
        recorder = EventRecorder()
        recorder(SheetApplied("h", False, 0, 0))
        assert recorder.events == [SheetApplied("h", False, 0, 0)]


class TestEventText:
    def test_param_applied_str(self):
        event = ParamApplied("Hidden1", "Learn.Lrate", "0.04", "0.2", ".Hidden")
        assert str(event) == "Hidden1: Learn.Lrate = 0.2 (was 0.04) [.Hidden]"

"""
Unit tests for textps/layout/flow.py - LineFlowEngine
"""
import random
from itertools import zip_longest

import pytest

from conftest import FakeShaper, make_geometry, make_line
from textps.contracts import BeginPage, ColumnSeparator, DrawLine, EndPage, total_height
from textps.layout import FlowCursor, HeaderFooterComposer, LineFlowEngine, drain_flow


def kinds(events):
    return [type(event).__name__ for event in events]


class TestSingleColumn:
    """Test flow into one column."""

    def test_lines_that_fit(self):
        """Three 30-unit lines stay on one page of a 100-unit column."""
        engine = LineFlowEngine(make_geometry(column_height=100))
        result = engine.layout([make_line(30) for _ in range(3)])

        assert result.page_count == 1
        assert kinds(result.events) == [
            "BeginPage", "DrawLine", "DrawLine", "DrawLine", "EndPage",
        ]
        offsets = [e.vertical_offset for e in result.events if isinstance(e, DrawLine)]
        assert offsets == [30, 60, 90]

    def test_overflow_starts_new_page(self):
        """The third 40-unit line does not fit after 80 units."""
        engine = LineFlowEngine(make_geometry(column_height=100))
        result = engine.layout([make_line(40, label=f"l{i}") for i in range(3)])

        assert result.page_count == 2
        assert kinds(result.events) == [
            "BeginPage", "DrawLine", "DrawLine", "EndPage",
            "BeginPage", "DrawLine", "EndPage",
        ]
        moved = result.lines_in(2, 0)[0]
        assert moved.line.render_token.label == "l2"
        assert moved.vertical_offset == 40

    def test_exact_fit_breaks(self):
        """A line that would end exactly at the column bottom moves on."""
        engine = LineFlowEngine(make_geometry(column_height=100))
        result = engine.layout([make_line(50), make_line(50)])

        assert result.page_count == 2
        assert len(result.lines_in(1, 0)) == 1
        assert len(result.lines_in(2, 0)) == 1

    def test_tall_first_line_is_placed(self):
        """A line taller than the column still lands at the top of a column."""
        engine = LineFlowEngine(make_geometry(column_height=100))
        result = engine.layout([make_line(150), make_line(10)])

        assert result.page_count == 2
        assert result.lines_in(1, 0)[0].vertical_offset == 150
        assert result.lines_in(2, 0)[0].vertical_offset == 10

    def test_empty_input(self):
        engine = LineFlowEngine(make_geometry())
        result = engine.layout([])

        assert result.events == [BeginPage(1), EndPage(1)]
        assert result.page_count == 1


class TestMultiColumn:
    """Test column breaks and separators."""

    def test_second_column(self):
        engine = LineFlowEngine(make_geometry(column_height=100, num_columns=2))
        result = engine.layout([make_line(60), make_line(60)])

        assert result.page_count == 1
        assert kinds(result.events) == [
            "BeginPage", "DrawLine", "ColumnSeparator", "DrawLine", "EndPage",
        ]
        separator = result.events[2]
        assert separator == ColumnSeparator(1)
        assert result.lines_in(1, 1)[0].vertical_offset == 60

    def test_separators_disabled(self):
        geometry = make_geometry(column_height=100, num_columns=2, separators=False)
        result = LineFlowEngine(geometry).layout([make_line(60), make_line(60)])

        assert not any(isinstance(e, ColumnSeparator) for e in result.events)
        assert len(result.lines_in(1, 1)) == 1

    def test_last_column_break_is_page_break(self):
        """No separator is emitted for a break out of the last column."""
        engine = LineFlowEngine(make_geometry(column_height=100, num_columns=2))
        result = engine.layout([make_line(60) for _ in range(3)])

        assert result.page_count == 2
        assert kinds(result.events) == [
            "BeginPage", "DrawLine", "ColumnSeparator", "DrawLine", "EndPage",
            "BeginPage", "DrawLine", "EndPage",
        ]
        assert result.lines_in(2, 0)[0].column_index == 0


class TestFormFeed:
    """Test form feed breaks."""

    def test_form_feed_moves_to_next_column(self):
        engine = LineFlowEngine(make_geometry(column_height=100, num_columns=2))
        result = engine.layout([make_line(10, form_feed=True), make_line(10)])

        assert result.page_count == 1
        assert len(result.lines_in(1, 0)) == 1
        assert len(result.lines_in(1, 1)) == 1

    def test_form_feed_in_last_column_starts_page(self):
        engine = LineFlowEngine(make_geometry(column_height=100, num_columns=1))
        result = engine.layout([make_line(10, form_feed=True), make_line(10)])

        assert result.page_count == 2
        assert result.lines_in(2, 0)[0].vertical_offset == 10

    def test_trailing_form_feed_adds_no_page(self):
        engine = LineFlowEngine(make_geometry())
        result = engine.layout([make_line(10), make_line(10, form_feed=True)])

        assert result.page_count == 1
        assert result.events[-1] == EndPage(1)

    def test_form_feed_only_affects_next_line(self):
        engine = LineFlowEngine(make_geometry(column_height=100, num_columns=3))
        lines = [make_line(10, form_feed=True), make_line(10), make_line(10)]
        result = engine.layout(lines)

        assert len(result.lines_in(1, 1)) == 2
        assert result.lines_in(1, 2) == []


class TestEngineState:
    """Test cursor threading and reuse."""

    def test_step_is_pure(self):
        engine = LineFlowEngine(make_geometry())
        cursor = FlowCursor()
        line = make_line(30)

        first = engine.step(cursor, line)
        second = engine.step(cursor, line)

        assert first == second
        assert cursor == FlowCursor()

    def test_deterministic(self):
        lines = [make_line(h) for h in (30, 45, 12, 80, 5, 60)]
        engine = LineFlowEngine(make_geometry(num_columns=2))
        assert engine.layout(lines).events == engine.layout(lines).events

    def test_engines_do_not_interfere(self):
        """Interleaved flows give the same events as sequential ones."""
        geometry = make_geometry(num_columns=2)
        a_lines = [make_line(40, label="a") for _ in range(7)]
        b_lines = [make_line(25, label="b") for _ in range(5)]
        expected_a = LineFlowEngine(geometry).layout(a_lines).events
        expected_b = LineFlowEngine(geometry).layout(b_lines).events

        flow_a = LineFlowEngine(geometry).flow(a_lines)
        flow_b = LineFlowEngine(geometry).flow(b_lines)
        got_a, got_b = [], []
        for event_a, event_b in zip_longest(flow_a, flow_b):
            if event_a is not None:
                got_a.append(event_a)
            if event_b is not None:
                got_b.append(event_b)

        assert got_a == expected_a
        assert got_b == expected_b

    def test_flow_returns_page_count(self):
        engine = LineFlowEngine(make_geometry(column_height=100))
        events = engine.flow([make_line(40) for _ in range(5)])

        with pytest.raises(StopIteration) as done:
            while True:
                next(events)
        assert done.value.value == 3

    def test_drain_flow(self):
        engine = LineFlowEngine(make_geometry(column_height=100, num_columns=2))
        seen = []
        pages = drain_flow(engine.flow([make_line(60) for _ in range(4)]), seen.append)

        assert pages == 2
        assert seen == engine.layout([make_line(60) for _ in range(4)]).events
        assert pages == sum(isinstance(e, BeginPage) for e in seen)

    def test_flow_is_lazy(self):
        """The first event is available before the input is consumed."""
        consumed = []

        def lines():
            for i in range(3):
                consumed.append(i)
                yield make_line(10)

        events = LineFlowEngine(make_geometry()).flow(lines())
        assert next(events) == BeginPage(1)
        assert consumed == []


class TestFlowProperties:
    """Randomized checks of the flow invariants."""

    @pytest.mark.parametrize("seed", range(20))
    def test_invariants(self, seed):
        rng = random.Random(seed)
        num_columns = rng.randint(1, 4)
        geometry = make_geometry(column_height=100, num_columns=num_columns)
        lines = [
            make_line(rng.choice([5, 10, 25, 40, 99]), form_feed=rng.random() < 0.05)
            for _ in range(rng.randint(0, 60))
        ]

        result = LineFlowEngine(geometry).layout(lines)

        begins = [e for e in result.events if isinstance(e, BeginPage)]
        ends = [e for e in result.events if isinstance(e, EndPage)]
        draws = [e for e in result.events if isinstance(e, DrawLine)]

        assert len(begins) == len(ends) == result.page_count
        assert [e.page_index for e in begins] == list(range(1, result.page_count + 1))
        assert len(draws) == len(lines)
        assert [d.line for d in draws] == lines

        for page_index in range(1, result.page_count + 1):
            for column in range(num_columns):
                placed = result.lines_in(page_index, column)
                assert all(d.column_index < num_columns for d in placed)
                if len(placed) > 1:
                    assert total_height(d.line for d in placed) < geometry.column_height_units

    @pytest.mark.parametrize("seed", range(10))
    def test_separators_never_follow_last_column(self, seed):
        rng = random.Random(seed)
        geometry = make_geometry(column_height=100, num_columns=3)
        lines = [make_line(rng.choice([10, 30, 55])) for _ in range(40)]

        result = LineFlowEngine(geometry).layout(lines)

        for event in result.events:
            if isinstance(event, ColumnSeparator):
                assert 1 <= event.column_index < 3


class TestFurniture:
    """Test header/footer composition per page."""

    def test_composer_called_once_per_page(self):
        shaper = FakeShaper()
        composer = HeaderFooterComposer(shaper, title="doc")
        geometry = make_geometry(column_height=100, do_draw_header=True, header_height=10.0)
        result = LineFlowEngine(geometry, composer).layout([make_line(60) for _ in range(3)])

        begins = [e for e in result.events if isinstance(e, BeginPage)]
        assert [b.header.right.text for b in begins] == ["Page 1", "Page 2", "Page 3"]
        assert all(b.footer is None for b in begins)

    def test_no_composer_no_furniture(self):
        geometry = make_geometry(do_draw_header=True)
        result = LineFlowEngine(geometry).layout([make_line(10)])
        assert result.events[0].header is None

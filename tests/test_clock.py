"""
Tests for the logic clock.
Tests verify cycle counting is independent of how time is sliced into frames.
"""

import pytest

from tetris_engine.games.tetris.clock import LogicClock


def drain(clock):
    """Consume every pending cycle and return how many there were."""
    count = 0
    while clock.has_elapsed_cycle():
        count += 1
    return count


class TestRate:
    """Tests for rate configuration."""

    def test_millis_per_cycle(self, fake_time):
        """Test rate converts to milliseconds per cycle."""
        clock = LogicClock(4.0, fake_time)

        assert clock.rate == 4.0
        assert clock.millis_per_cycle == pytest.approx(250.0)

    def test_non_positive_rate_rejected(self, fake_time):
        """Test a zero rate raises instead of dividing by zero."""
        clock = LogicClock(1.0, fake_time)

        with pytest.raises(ValueError):
            clock.set_rate(0)

    def test_set_rate_keeps_excess(self, fake_time):
        """Test changing rate does not discard progress toward the next cycle."""
        clock = LogicClock(1.0, fake_time)
        fake_time.advance(600)
        clock.update()

        clock.set_rate(2.0)

        assert clock.excess == pytest.approx(600.0)
        assert drain(clock) == 0

        clock.update()
        # 600ms of excess is one 500ms cycle plus 100ms
        assert drain(clock) == 1
        assert clock.excess == pytest.approx(100.0)


class TestCounting:
    """Tests for cycle accumulation."""

    @pytest.mark.parametrize("cycles", [1, 3, 10])
    def test_n_cycles_elapsed(self, fake_time, cycles):
        """Test N cycle-durations of time yield N cycles."""
        clock = LogicClock(2.0, fake_time)
        clock.reset()

        fake_time.advance(cycles * clock.millis_per_cycle)
        clock.update()

        assert drain(clock) == cycles

    def test_frame_slicing_does_not_matter(self, fake_time):
        """Test many small frames count the same cycles as one big frame."""
        clock = LogicClock(1.0, fake_time)

        for _ in range(150):
            fake_time.advance(20)  # 50 fps
            clock.update()

        assert drain(clock) == 3
        assert clock.excess == pytest.approx(0.0)

    def test_fraction_carried_over(self, fake_time):
        """Test partial cycles accumulate across updates."""
        clock = LogicClock(1.0, fake_time)

        fake_time.advance(600)
        clock.update()
        assert not clock.peek_elapsed_cycle()

        fake_time.advance(600)
        clock.update()
        assert clock.has_elapsed_cycle()
        assert clock.excess == pytest.approx(200.0)

    def test_update_with_explicit_time(self, fake_time):
        """Test update accepts a timestamp instead of reading the source."""
        clock = LogicClock(1.0, fake_time)

        clock.update(fake_time.now + 2000)

        assert clock.pending_cycles == 2

    def test_stale_timestamp_counts_as_no_time(self, fake_time):
        """Test a timestamp older than the last reset never yields negative cycles."""
        clock = LogicClock(1.0, fake_time)
        stale = fake_time.now
        fake_time.advance(300)
        clock.reset()

        clock.update(stale)

        assert clock.pending_cycles == 0
        assert clock.excess == pytest.approx(0.0)

        fake_time.advance(1000)
        clock.update()
        assert clock.pending_cycles == 1

    def test_has_elapsed_consumes_one(self, fake_time):
        """Test has_elapsed_cycle consumes exactly one pending cycle."""
        clock = LogicClock(1.0, fake_time)
        fake_time.advance(3000)
        clock.update()

        assert clock.has_elapsed_cycle()
        assert clock.pending_cycles == 2

    def test_peek_does_not_consume(self, fake_time):
        """Test peek_elapsed_cycle leaves the pending count alone."""
        clock = LogicClock(1.0, fake_time)
        fake_time.advance(1000)
        clock.update()

        assert clock.peek_elapsed_cycle()
        assert clock.peek_elapsed_cycle()
        assert clock.pending_cycles == 1


class TestResetAndPause:
    """Tests for reset and pause behaviour."""

    def test_reset_clears_everything(self, fake_time):
        """Test reset drops pending cycles and excess and unpauses."""
        clock = LogicClock(1.0, fake_time)
        fake_time.advance(2500)
        clock.update()
        clock.set_paused(True)

        clock.reset()

        assert clock.pending_cycles == 0
        assert clock.excess == 0.0
        assert not clock.is_paused

    def test_reset_restarts_timing(self, fake_time):
        """Test time before a reset is not counted after it."""
        clock = LogicClock(1.0, fake_time)
        fake_time.advance(900)
        clock.reset()

        fake_time.advance(900)
        clock.update()

        assert drain(clock) == 0

    def test_paused_update_is_noop(self, fake_time):
        """Test a paused clock accumulates nothing."""
        clock = LogicClock(1.0, fake_time)
        clock.set_paused(True)

        fake_time.advance(5000)
        clock.update()

        assert clock.pending_cycles == 0
        assert clock.excess == 0.0

    def test_paused_time_not_credited_on_resume(self, fake_time):
        """Test time spent paused does not turn into cycles after resuming."""
        clock = LogicClock(1.0, fake_time)
        fake_time.advance(400)
        clock.update()
        clock.set_paused(True)

        fake_time.advance(10000)
        clock.set_paused(False)
        fake_time.advance(500)
        clock.update()

        assert drain(clock) == 0
        assert clock.excess == pytest.approx(900.0)

from oled_status.control.event import Stimulus, StimulusQueue
from oled_status.control.timers import TimerSet


def test_pending_stimulus_is_not_queued_twice() -> None:
    stimuli: StimulusQueue = StimulusQueue()

    stimuli.put(Stimulus.UPDATE)
    stimuli.put(Stimulus.SCREEN_SWITCH)
    stimuli.put(Stimulus.UPDATE)

    assert stimuli.pending == [Stimulus.UPDATE, Stimulus.SCREEN_SWITCH]


def test_stimulus_can_be_queued_again_after_it_was_taken() -> None:
    stimuli: StimulusQueue = StimulusQueue()

    stimuli.put(Stimulus.UPDATE)
    assert stimuli.get_nowait() == Stimulus.UPDATE
    stimuli.put(Stimulus.UPDATE)

    assert stimuli.pending == [Stimulus.UPDATE]



def test_timer_puts_its_stimulus_into_the_queue() -> None:
    stimuli: StimulusQueue = StimulusQueue()
    timers = TimerSet(stimuli)
    timers.add("update", 0.1, Stimulus.UPDATE)

    timers.start()
    try:
        assert stimuli.get(timeout=5) == Stimulus.UPDATE
    finally:
        timers.shutdown()

    assert not timers.running

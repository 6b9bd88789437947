from scheduler import FrameScheduler, now_ms


def test_run_frame_calls_pending_once():
    sched = FrameScheduler()
    seen = []
    sched.request(seen.append)
    assert sched.run_frame(16.0)
    assert seen == [16.0]
    assert not sched.run_frame(32.0)
    assert seen == [16.0]


def test_callback_can_reschedule_itself():
    sched = FrameScheduler()
    seen = []

    def tick(ts):
        seen.append(ts)
        if len(seen) < 3:
            sched.request(tick)

    sched.request(tick)
    for ts in (1, 2, 3, 4):
        sched.run_frame(ts)
    assert seen == [1, 2, 3]


def test_now_ms_is_monotonic():
    a = now_ms()
    b = now_ms()
    assert b >= a

from flappy.data_models import Command, Phase
from flappy.driver import FrameDriver


class FakeClock:
    def __init__(self):
        self.calls = []

    def tick(self, fps):
        self.calls.append(fps)
        return 1000 // fps


class FakeRenderer:
    def __init__(self):
        self.frames = []

    def draw(self, snapshot):
        self.frames.append(snapshot)


def test_step_ticks_then_draws(session):
    clock, renderer = FakeClock(), FakeRenderer()
    presented = []
    driver = FrameDriver(session, renderer, clock, fps=30, present=lambda: presented.append(1))

    session.submit(Command.ACTIVATE)
    driver.step()

    assert renderer.frames[0].phase is Phase.PLAYING
    assert renderer.frames[0].bird.velocity == 0.5
    assert clock.calls == [30]
    assert presented == [1]
    assert driver.frames == 1


def test_run_stops_when_told(session):
    clock, renderer = FakeClock(), FakeRenderer()
    driver = FrameDriver(session, renderer, clock)
    remaining = iter([True, True, True, False])

    driver.run(lambda: next(remaining))

    assert driver.frames == 3
    assert len(renderer.frames) == 3


def test_headless_driver(playing):
    driver = FrameDriver(playing, None, FakeClock())
    driver.step()
    assert playing.bird.velocity == 0.5

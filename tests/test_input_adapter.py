import pygame

from flappy.data_models import Command
from flappy.input_adapter import InputAdapter


def key(event_type, k=pygame.K_SPACE):
    return pygame.event.Event(event_type, key=k)


def test_space_fires_once_per_press():
    adapter = InputAdapter()
    assert adapter.translate(key(pygame.KEYDOWN)) is Command.ACTIVATE
    # Key repeat while held
    assert adapter.translate(key(pygame.KEYDOWN)) is None
    assert adapter.translate(key(pygame.KEYUP)) is None
    assert adapter.translate(key(pygame.KEYDOWN)) is Command.ACTIVATE


def test_other_keys_are_ignored():
    adapter = InputAdapter()
    assert adapter.translate(key(pygame.KEYDOWN, pygame.K_a)) is None


def test_primary_click_activates():
    adapter = InputAdapter()
    click = pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=1, pos=(10, 10), touch=False)
    right = pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=3, pos=(10, 10), touch=False)
    assert adapter.translate(click) is Command.ACTIVATE
    assert adapter.translate(right) is None


def test_touch_activates_once():
    adapter = InputAdapter()
    finger = pygame.event.Event(pygame.FINGERDOWN, x=0.5, y=0.5, finger_id=0)
    mirrored = pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=1, pos=(200, 300), touch=True)
    assert adapter.translate(finger) is Command.ACTIVATE
    assert adapter.translate(mirrored) is None


def test_focus_loss_releases_held_keys():
    adapter = InputAdapter()
    adapter.translate(key(pygame.KEYDOWN))
    adapter.translate(pygame.event.Event(pygame.WINDOWFOCUSLOST))
    assert adapter.translate(key(pygame.KEYDOWN)) is Command.ACTIVATE

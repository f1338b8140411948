"""Tests for InputHandler."""

from collections import defaultdict

import pygame

from riverwood.input.handler import KEY_BINDINGS, InputHandler
from riverwood.simulation.commands import Button


def _keys(*codes: int) -> defaultdict:
    keys = defaultdict(bool)
    for code in codes:
        keys[code] = True
    return keys


class TestBindings:
    def test_every_button_bound(self):
        assert set(KEY_BINDINGS) == set(Button)

    def test_no_key_bound_twice(self):
        codes = [code for keys in KEY_BINDINGS.values() for code in keys]
        assert len(codes) == len(set(codes))


class TestPoll:
    def test_nothing_held(self):
        frame = InputHandler().poll(_keys())
        assert frame.held == frozenset()
        assert frame.just_pressed == frozenset()

    def test_first_poll_is_an_edge(self):
        frame = InputHandler().poll(_keys(pygame.K_UP))
        assert frame.is_pressed(Button.UP)
        assert frame.is_just_pressed(Button.UP)

    def test_held_key_is_not_an_edge_twice(self):
        handler = InputHandler()
        handler.poll(_keys(pygame.K_z))
        frame = handler.poll(_keys(pygame.K_z))
        assert frame.is_pressed(Button.HARVEST)
        assert not frame.is_just_pressed(Button.HARVEST)

    def test_release_then_press_is_an_edge(self):
        handler = InputHandler()
        handler.poll(_keys(pygame.K_x))
        handler.poll(_keys())
        assert handler.poll(_keys(pygame.K_x)).is_just_pressed(Button.BUILD)

    def test_alternate_keys(self):
        frame = InputHandler().poll(_keys(pygame.K_a, pygame.K_SPACE, pygame.K_b))
        assert frame.held == {Button.LEFT, Button.HARVEST, Button.BUILD}

    def test_switching_keys_of_one_button_is_not_an_edge(self):
        handler = InputHandler()
        handler.poll(_keys(pygame.K_RIGHT))
        frame = handler.poll(_keys(pygame.K_d))
        assert frame.is_pressed(Button.RIGHT)
        assert not frame.is_just_pressed(Button.RIGHT)

    def test_edges_are_per_button(self):
        handler = InputHandler()
        handler.poll(_keys(pygame.K_DOWN))
        frame = handler.poll(_keys(pygame.K_DOWN, pygame.K_z))
        assert frame.just_pressed == {Button.HARVEST}
        assert frame.held == {Button.DOWN, Button.HARVEST}

    def test_unbound_keys_ignored(self):
        frame = InputHandler().poll(_keys(pygame.K_q, pygame.K_RETURN))
        assert frame.held == frozenset()

    def test_custom_bindings(self):
        handler = InputHandler({Button.HARVEST: (pygame.K_h,)})
        assert handler.poll(_keys(pygame.K_h)).is_just_pressed(Button.HARVEST)
        assert handler.poll(_keys(pygame.K_z)).held == frozenset()


class TestReset:
    def test_reset_makes_held_key_an_edge_again(self):
        handler = InputHandler()
        handler.poll(_keys(pygame.K_UP))
        handler.reset()
        assert handler.poll(_keys(pygame.K_UP)).is_just_pressed(Button.UP)

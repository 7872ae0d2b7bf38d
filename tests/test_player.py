"""Tests for the player paddle."""

import pytest

from breakout.game.entities import Player, PlayerConfig, create_player
from breakout.input import KeyState
from breakout.models import Vector2D

LEFT = KeyState(left=True)
RIGHT = KeyState(right=True)
BOTH = KeyState(left=True, right=True)
NONE = KeyState()


@pytest.fixture
def player():
    return Player(Vector2D(x=640, y=670), 100, 20)


class TestInit:
    """Tests for construction and init()."""

    def test_starts_at_rest(self, player):
        assert player.velocity == Vector2D(x=0, y=0)
        assert player.acceleration == Vector2D(x=0, y=0)

    def test_init_resets_motion(self, player):
        player.velocity = Vector2D(x=5, y=1)
        player.acceleration = Vector2D(x=0.3, y=0.1)

        player.init()
        player.init()

        assert player.velocity == Vector2D(x=0, y=0)
        assert player.acceleration == Vector2D(x=0, y=0)

    def test_create_player(self):
        player = create_player(1280, 720)
        assert player.position == Vector2D(x=640, y=670)
        assert (player.width, player.height) == (100, 20)

    def test_default_config(self, player):
        assert player.config == PlayerConfig()


class TestCheckInput:
    """Tests for keyboard-driven acceleration."""

    def test_right_accelerates(self, player):
        player.check_input(RIGHT)
        assert player.acceleration.x == pytest.approx(0.1)

    def test_left_accelerates(self, player):
        player.check_input(LEFT)
        assert player.acceleration.x == pytest.approx(-0.1)

    def test_right_clamped(self, player):
        """Holding right never pushes acceleration past the max."""
        for _ in range(100):
            player.check_input(RIGHT)
            player.update()
            assert player.acceleration.x <= 0.3
        assert player.acceleration.x == 0.3

    def test_left_clamped(self, player):
        for _ in range(100):
            player.check_input(LEFT)
            player.update()
            assert player.acceleration.x >= -0.3
        assert player.acceleration.x == -0.3

    def test_left_wins_when_both_held(self, player):
        player.check_input(BOTH)
        assert player.acceleration.x == pytest.approx(-0.1)

    def test_release_snaps_acceleration_to_zero(self, player):
        for _ in range(3):
            player.check_input(RIGHT)
        player.check_input(NONE)
        assert player.acceleration.x == 0

    def test_friction_stops_paddle_without_overshoot(self, player):
        """From vx=5 with no keys, velocity decays to exactly 0 and stays."""
        player.velocity = Vector2D(x=5, y=0)
        history = []
        for _ in range(40):
            player.check_input(NONE)
            player.update()
            history.append(player.velocity.x)

        assert history[-1] == 0
        assert all(v >= 0 for v in history)
        assert history == sorted(history, reverse=True)
        assert history[0] == pytest.approx(4.8)

    def test_friction_from_negative_velocity(self, player):
        player.velocity = Vector2D(x=-5, y=0)
        for _ in range(40):
            player.check_input(NONE)
            player.update()
            assert player.velocity.x <= 0
        assert player.velocity.x == 0

    def test_slow_paddle_stops_immediately(self, player):
        player.velocity = Vector2D(x=1.9, y=0)
        player.check_input(NONE)
        assert player.velocity.x == 0

    def test_no_friction_while_key_held(self, player):
        player.velocity = Vector2D(x=5, y=0)
        player.check_input(RIGHT)
        assert player.velocity.x == 5


class TestUpdate:
    """Tests for paddle motion integration."""

    def test_velocity_lags_acceleration_by_one_frame(self, player):
        """Position moves by last frame's velocity; acceleration feeds the next."""
        player.check_input(RIGHT)
        player.update()
        assert player.position.x == 640
        assert player.velocity.x == pytest.approx(0.1)

        player.check_input(RIGHT)
        player.update()
        assert player.position.x == pytest.approx(640.1)
        assert player.velocity.x == pytest.approx(0.3)

    def test_rectangle_follows_position(self, player):
        player.velocity = Vector2D(x=10, y=0)
        player.update()
        assert player.rectangle.x == player.position.x + 50


class TestWallPrevention:
    """Tests for prevent_left / prevent_right."""

    def test_prevent_left_bounces_and_halves(self, player):
        player.velocity = Vector2D(x=-4, y=0)
        player.prevent_left()
        assert player.velocity.x == 2.0

    def test_prevent_left_ignores_rightward_motion(self, player):
        player.velocity = Vector2D(x=4, y=0)
        player.prevent_left()
        assert player.velocity.x == 4

    def test_prevent_right_bounces_and_halves(self, player):
        player.velocity = Vector2D(x=3, y=0)
        player.prevent_right()
        assert player.velocity.x == -1.5

    def test_prevent_right_ignores_leftward_motion(self, player):
        player.velocity = Vector2D(x=-3, y=0)
        player.prevent_right()
        assert player.velocity.x == -3

import pygame

from game.constants import PROJECTILE_SPEED
from game.projectile import Projectile
from ui.colors import PROJECTILE_COLOR


def test_new_projectile_is_free():
    projectile = Projectile()
    assert projectile.free


def test_free_projectile_does_not_move():
    projectile = Projectile()
    projectile.y = 300
    projectile.update()
    assert projectile.y == 300


def test_start_centers_on_launch_point():
    projectile = Projectile()
    projectile.start(100, 500)

    assert not projectile.free
    assert projectile.x == 100 - projectile.width * 0.5
    assert projectile.y == 500


def test_projectile_flies_until_off_screen_then_frees():
    projectile = Projectile()
    projectile.start(100, 700)

    # 700 - 15 * 49 = -35, still partly visible
    for _ in range(49):
        projectile.update()
    assert not projectile.free
    assert projectile.y == 700 - PROJECTILE_SPEED * 49

    projectile.update()
    assert projectile.free


def test_freed_projectile_can_be_reused():
    projectile = Projectile()
    projectile.start(100, 0)
    for _ in range(10):
        projectile.update()
    assert projectile.free

    projectile.start(200, 400)
    assert not projectile.free
    assert projectile.y == 400


def test_reset_returns_projectile_to_pool():
    projectile = Projectile()
    projectile.start(50, 50)
    projectile.reset()
    assert projectile.free


def test_draw_only_when_in_flight():
    surface = pygame.Surface((200, 200))
    surface.fill((0, 0, 0))
    projectile = Projectile()
    projectile.x, projectile.y = 96, 80

    projectile.draw(surface)
    assert tuple(surface.get_at((100, 100)))[:3] == (0, 0, 0)

    projectile.start(100, 80)
    projectile.draw(surface)
    assert tuple(surface.get_at((100, 100)))[:3] == PROJECTILE_COLOR

import pygame

from game.constants import PLAYER_SPEED, PROJECTILE_WIDTH, STARTING_LIVES


def test_player_spawns_centered_at_bottom(game):
    player = game.player
    assert player.x == game.width / 2 - player.width / 2
    assert player.y == game.height - player.height
    assert player.lives == STARTING_LIVES


def test_held_arrow_keys_move_player(game):
    player = game.player
    start_x = player.x

    game.keys.add(pygame.K_RIGHT)
    player.update()
    assert player.x == start_x + PLAYER_SPEED

    game.keys.clear()
    game.keys.add(pygame.K_LEFT)
    player.update()
    player.update()
    assert player.x == start_x - PLAYER_SPEED


def test_player_without_keys_stays_put(game):
    start_x = game.player.x
    game.player.update()
    assert game.player.x == start_x


def test_player_clamped_to_half_off_screen(game):
    player = game.player

    player.x = -1000
    player.update()
    assert player.x == -player.width * 0.5

    player.x = 1000
    player.update()
    assert player.x == game.width - player.width * 0.5


def test_player_cannot_leave_screen_while_key_held(game):
    player = game.player
    game.keys.add(pygame.K_LEFT)
    for _ in range(500):
        player.update()
        assert -player.width * 0.5 <= player.x <= game.width - player.width * 0.5


def test_shoot_launches_projectile_from_nose(game):
    player = game.player
    projectile = player.shoot()

    assert projectile is not None
    assert not projectile.free
    assert projectile.x == player.x + player.width * 0.5 - PROJECTILE_WIDTH * 0.5
    assert projectile.y == player.y


def test_shoot_with_exhausted_pool_returns_none(game):
    for _ in range(game.number_of_projectiles):
        assert game.player.shoot() is not None
    assert game.player.shoot() is None


def test_restart_restores_spawn_and_lives(game):
    player = game.player
    player.x = 10
    player.lives = 2

    player.restart()

    assert player.x == game.width / 2 - player.width / 2
    assert player.lives == STARTING_LIVES


def test_draw_paints_the_ship(game):
    surface = pygame.Surface((game.width, game.height))
    surface.fill((0, 0, 0))
    game.player.draw(surface)

    cx, cy = (int(c) for c in game.player.get_center())
    assert tuple(surface.get_at((cx, cy)))[:3] != (0, 0, 0)

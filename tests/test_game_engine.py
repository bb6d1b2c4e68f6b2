import pygame

from game.constants import PROJECTILE_POOL_SIZE, STARTING_LIVES
from game.game_engine import Game


def press(game, key):
    fired = game.handle_key_down(key)
    game.handle_key_up(key)
    return fired


def park_wave_on_player(game):
    """Move the first wave so its bottom row overlaps the ship."""
    wave = game.waves[0]
    wave.x = game.player.x
    wave.y = game.player.y - game.enemy_size
    wave.speed_x = 0


def test_pool_is_preallocated(game):
    assert len(game.projectiles_pool) == PROJECTILE_POOL_SIZE
    assert all(p.free for p in game.projectiles_pool)


def test_get_projectile_returns_first_free(game):
    first = game.projectiles_pool[0]
    first.start(0, 100)
    assert game.get_projectile() is game.projectiles_pool[1]


def test_firing_with_pool_exhausted_does_nothing(game):
    for _ in range(PROJECTILE_POOL_SIZE):
        assert press(game, pygame.K_SPACE)
    assert not any(p.free for p in game.projectiles_pool)

    positions = [(p.x, p.y) for p in game.projectiles_pool]
    assert not press(game, pygame.K_SPACE)
    assert [(p.x, p.y) for p in game.projectiles_pool] == positions


def test_holding_space_fires_once(game):
    assert game.handle_key_down(pygame.K_SPACE)
    assert not game.handle_key_down(pygame.K_SPACE)
    game.handle_key_up(pygame.K_SPACE)
    assert game.handle_key_down(pygame.K_SPACE)


def test_moving_does_not_block_firing(game):
    game.handle_key_down(pygame.K_LEFT)
    assert game.handle_key_down(pygame.K_SPACE)
    game.handle_key_up(pygame.K_LEFT)
    assert game.fired


def test_held_keys_drive_player(game):
    start_x = game.player.x
    game.handle_key_down(pygame.K_RIGHT)
    game.update(16)
    assert game.player.x > start_x

    game.handle_key_up(pygame.K_RIGHT)
    moved_x = game.player.x
    game.update(16)
    assert game.player.x == moved_x


def test_sprite_timer_ticks_every_interval(game):
    game.update(100)
    assert not game.sprite_update
    game.update(100)
    assert not game.sprite_update
    game.update(16)
    assert game.sprite_update
    assert game.sprite_timer == 0
    game.update(16)
    assert not game.sprite_update


def test_projectile_hits_enemy_and_scores(game):
    wave = game.waves[0]
    wave.y = 0
    wave.speed_x = 0
    target = wave.enemies[2]
    game.projectiles_pool[0].start(wave.x + target.position_x + 40, 150)

    events = game.update(16)
    assert len(events['enemies_hit']) == 1
    assert target.lives == 0

    scored = 0
    for _ in range(60):
        scored += game.update(16)['score_change']
    assert scored == 1
    assert game.score == 1
    assert target not in wave.enemies


def test_collision_with_player_costs_life(game):
    park_wave_on_player(game)
    events = game.update(16)

    assert events['life_lost']
    # Both enemies in the bottom row overlap the ship
    assert game.player.lives == STARTING_LIVES - 2
    assert len(game.waves[0].enemies) == 2


def test_game_over_event_fires_once_and_records_high_score(game):
    game.score = 3
    game.player.lives = 1
    park_wave_on_player(game)

    events = game.update(16)
    assert events['game_over']
    assert game.game_over
    assert game.score == 2
    assert game.high_score == 2

    assert not game.update(16)['game_over']


def test_restart_ignored_while_playing(game):
    game.score = 5
    press(game, pygame.K_r)
    assert game.score == 5


def test_restart_after_game_over(game):
    game.player.shoot()
    game.score = 7
    game.wave_count = 4
    game.columns = 5
    game.player.lives = 0
    game.game_over = True

    press(game, pygame.K_r)

    assert not game.game_over
    assert game.score == 0
    assert game.wave_count == 1
    assert game.player.lives == STARTING_LIVES
    assert (game.columns, game.rows) == (2, 2)
    assert len(game.waves) == 1
    assert all(p.free for p in game.projectiles_pool)


def test_pause_freezes_the_game(game):
    wave = game.waves[0]
    game.toggle_pause()
    assert game.paused

    position = (wave.x, wave.y)
    events = game.update(16)
    assert (wave.x, wave.y) == position
    assert events['score_change'] == 0
    assert not game.handle_key_down(pygame.K_SPACE)

    game.toggle_pause()
    assert not game.paused
    game.update(16)
    assert (wave.x, wave.y) != position


def test_cannot_pause_after_game_over(game):
    game.game_over = True
    game.pause_game()
    assert not game.paused


def test_check_collision_uses_bounding_boxes(game):
    projectile = game.projectiles_pool[0]
    projectile.start(game.player.x + 10, game.player.y + 10)
    assert game.check_collision(projectile, game.player)

    projectile.start(0, 0)
    assert not game.check_collision(projectile, game.player)


def test_game_state_snapshot(game):
    state = game.get_game_state()
    assert state == {
        'score': 0,
        'lives': STARTING_LIVES,
        'wave': 1,
        'high_score': 0,
        'game_over': False,
        'paused': False,
        'enemies_remaining': 4,
    }


def test_same_seed_same_waves():
    a = Game(seed=7)
    b = Game(seed=7)
    assert a.waves[0].speed_x == b.waves[0].speed_x
    assert [e.frame_y for e in a.waves[0].enemies] == [e.frame_y for e in b.waves[0].enemies]


def test_draw_renders_without_error(game):
    surface = pygame.Surface((game.width, game.height))
    game.player.shoot()
    game.update(16)
    game.draw(surface)


def test_check_collision_counts_sub_pixel_overlap():
    game = Game(width=601, seed=1234)
    wave = game.waves[0]
    enemy = wave.enemies[0]
    enemy.update(wave.x, 100)
    assert enemy.x == 220.5

    projectile = game.projectiles_pool[0]
    projectile.start(216.6, 120)
    assert projectile.x + projectile.width > enemy.x
    assert game.check_collision(projectile, enemy)
    assert game.check_collision(enemy, projectile)

    projectile.start(216.5, 120)
    assert not game.check_collision(projectile, enemy)


def test_touching_edges_do_not_collide(game):
    projectile = game.projectiles_pool[0]
    projectile.start(game.player.x - projectile.width * 0.5, game.player.y)
    assert projectile.x + projectile.width == game.player.x
    assert not game.check_collision(projectile, game.player)

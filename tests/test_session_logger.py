import json
import os

import pytest

from session.session_logger import SessionLogger


STATE = {'score': 3, 'lives': 9, 'wave': 2, 'high_score': 10}


@pytest.fixture
def logger(tmp_path):
    return SessionLogger(str(tmp_path / "logs"))


def read_log(logger):
    with open(logger.get_session_file()) as f:
        return json.load(f)


def test_creates_log_directory(tmp_path):
    SessionLogger(str(tmp_path / "nested" / "logs"))
    assert os.path.isdir(tmp_path / "nested" / "logs")


def test_logging_before_start_is_ignored(logger):
    logger.log_shot(STATE)
    logger.log_life_lost(STATE)
    assert not logger.is_active()
    assert logger.get_summary() is None
    assert logger.get_duration() == 0.0


def test_start_session_writes_file(logger):
    logger.start_session()

    assert logger.is_active()
    data = read_log(logger)
    assert data['session_id'] == logger.session_id
    assert data['events'] == []
    assert os.path.basename(logger.get_session_file()) == f"session_{logger.session_id}.json"


def test_events_carry_state_snapshot(logger):
    logger.start_session()
    logger.log_enemy_destroyed(STATE, (140, 60))

    event = read_log(logger)['events'][0]
    assert event['type'] == 'enemy_destroyed'
    assert event['game_state'] == {'score': 3, 'lives': 9, 'wave': 2}
    assert event['position'] == [140, 60]
    assert event['elapsed_seconds'] >= 0


def test_summary_counts_and_accuracy(logger):
    logger.start_session()
    for _ in range(4):
        logger.log_shot(STATE)
    logger.log_enemy_hit(STATE, (100, 100))
    logger.log_enemy_destroyed(STATE, (100, 100))
    logger.log_life_lost(STATE)
    logger.log_wave_cleared(STATE, next_wave=3)

    summary = logger.get_summary()
    assert summary == {
        'shots_fired': 4,
        'hits': 1,
        'accuracy': 25.0,
        'enemies_destroyed': 1,
        'lives_lost': 1,
        'waves_cleared': 1,
    }
    assert read_log(logger)['events'][-1]['cleared_wave'] == 2


def test_end_session_saves_final_data_and_resets(logger):
    logger.start_session()
    logger.log_shot(STATE)
    logger.log_game_over(STATE)
    path = logger.get_session_file()

    logger.end_session(final_score=12, final_wave=4)

    assert not logger.is_active()
    assert logger.get_session_file() is None
    with open(path) as f:
        data = json.load(f)
    assert data['final_score'] == 12
    assert data['final_wave'] == 4
    assert data['duration_seconds'] >= 0
    assert [e['type'] for e in data['events']] == ['shot', 'game_over']


def test_end_session_without_start_is_noop(logger):
    logger.end_session(0, 1)
    assert not logger.is_active()

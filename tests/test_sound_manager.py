import numpy as np
import pytest

from game.sound_manager import SoundManager


def test_effects_are_generated_when_mixer_available():
    manager = SoundManager()
    if manager.is_enabled():
        assert set(manager.sounds) == {
            'fire', 'hit', 'explosion', 'life_lost', 'wave_cleared', 'game_over'
        }


def test_toggle_sound():
    manager = SoundManager()
    before = manager.is_enabled()
    assert manager.toggle_sound() is (not before)
    assert manager.toggle_sound() is before


def test_play_when_disabled_is_silent():
    manager = SoundManager()
    manager.enabled = False
    manager.play_fire()
    manager.play('no_such_sound')


def test_volume_is_clamped():
    manager = SoundManager()
    manager.set_volume(2.0)
    assert manager.volume == 1.0
    manager.set_volume(-1.0)
    assert manager.volume == 0.0


def test_sweep_stays_in_unit_range():
    t = SoundManager._timeline(0.1)
    samples = SoundManager._sweep(t, 800, 200)
    assert len(samples) == 4410
    assert np.max(np.abs(samples)) <= 1.0


def test_master_volume_keeps_effect_mix():
    manager = SoundManager()
    if not manager.is_enabled():
        pytest.skip("mixer unavailable")

    before = {name: sound.get_volume() for name, sound in manager.sounds.items()}
    manager.set_volume(manager.volume)
    assert {name: sound.get_volume() for name, sound in manager.sounds.items()} == before

    manager.set_volume(0.35)
    for name, sound in manager.sounds.items():
        assert sound.get_volume() == pytest.approx(before[name] / 2, abs=0.02)

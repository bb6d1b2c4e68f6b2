"""Sound manager for game audio effects."""

import pygame
import numpy as np

SAMPLE_RATE = 44100


class SoundManager:
    """Synthesises and plays the game's sound effects."""

    def __init__(self):
        """Initialize the mixer and generate every effect."""
        self.enabled = True
        self.volume = 0.7
        self.sounds = {}
        # (sound, per-effect level) pairs, scaled by the master volume
        self.levels = []
        self.channels = 2

        if not pygame.mixer.get_init():
            try:
                pygame.mixer.init(frequency=SAMPLE_RATE, size=-16, channels=2, buffer=512)
            except pygame.error as e:
                print(f"Could not initialize sound mixer: {e}")
                self.enabled = False
                return

        self.channels = pygame.mixer.get_init()[2]
        self._generate_sounds()

    def _generate_sounds(self):
        """Generate sound effects programmatically."""
        try:
            self.sounds['fire'] = self._create_fire_sound()
            self.sounds['hit'] = self._create_hit_sound()
            self.sounds['explosion'] = self._create_explosion_sound()
            self.sounds['life_lost'] = self._create_life_lost_sound()
            self.sounds['wave_cleared'] = self._create_wave_cleared_sound()
            self.sounds['game_over'] = self._create_game_over_sound()
        except pygame.error as e:
            print(f"Error generating sounds: {e}")
            self.enabled = False

    @staticmethod
    def _timeline(duration: float) -> np.ndarray:
        return np.arange(int(SAMPLE_RATE * duration)) / SAMPLE_RATE

    @staticmethod
    def _sweep(t: np.ndarray, start_hz: float, end_hz: float) -> np.ndarray:
        """Sine wave whose frequency moves linearly from start_hz to end_hz."""
        duration = t[-1] if len(t) else 1.0
        phase = 2 * np.pi * (start_hz * t + (end_hz - start_hz) * t ** 2 / (2 * duration))
        return np.sin(phase)

    def _create_sound_from_samples(self, samples: np.ndarray, volume: float) -> pygame.mixer.Sound:
        """Normalise float samples to 16-bit and wrap them in a Sound."""
        peak = np.max(np.abs(samples)) if len(samples) else 0
        if peak > 0:
            samples = samples / peak
        pcm = (samples * 32767).astype(np.int16)
        if self.channels > 1:
            pcm = np.repeat(pcm[:, np.newaxis], self.channels, axis=1)

        sound = pygame.mixer.Sound(buffer=np.ascontiguousarray(pcm).tobytes())
        sound.set_volume(volume * self.volume)
        self.levels.append((sound, volume))
        return sound

    def _create_fire_sound(self):
        """Short descending laser zap."""
        t = self._timeline(0.12)
        samples = np.exp(-t * 25) * self._sweep(t, 1200, 300)
        return self._create_sound_from_samples(samples, 0.5)

    def _create_hit_sound(self):
        """Quick metallic tick when a projectile connects."""
        t = self._timeline(0.08)
        samples = np.exp(-t * 40) * (0.6 * np.sin(2 * np.pi * 900 * t) +
                                     0.4 * np.sin(2 * np.pi * 1350 * t))
        return self._create_sound_from_samples(samples, 0.5)

    def _create_explosion_sound(self):
        """Noise burst with a low rumble for a beetle splat."""
        t = self._timeline(0.35)
        noise = np.random.default_rng().uniform(-1, 1, len(t))
        rumble = np.sin(2 * np.pi * 60 * t) + np.sin(2 * np.pi * 40 * t)
        samples = np.exp(-t * 6) * (0.7 * noise + 0.3 * rumble)
        return self._create_sound_from_samples(samples, 0.6)

    def _create_life_lost_sound(self):
        """Deep descending tone."""
        t = self._timeline(0.5)
        tone = self._sweep(t, 200, 100)
        samples = np.exp(-t * 4) * (tone + 0.3 * np.sign(tone))
        return self._create_sound_from_samples(samples, 0.6)

    def _create_wave_cleared_sound(self):
        """Ascending arpeggio."""
        t = self._timeline(0.7)
        samples = np.zeros_like(t)
        # (start, duration, frequency)
        notes = [(0.0, 0.15, 523), (0.1, 0.15, 659), (0.2, 0.15, 784), (0.3, 0.4, 1047)]
        for start, dur, freq in notes:
            note_t = t - start
            mask = (t >= start) & (t < start + dur)
            envelope = np.exp(-note_t * 5) * (1 - np.exp(-note_t * 50))
            voice = 0.7 * np.sin(2 * np.pi * freq * t) + 0.3 * np.sin(2 * np.pi * freq * 2 * t)
            samples += np.where(mask, envelope * voice, 0.0)
        return self._create_sound_from_samples(samples, 0.7)

    def _create_game_over_sound(self):
        """Slow falling minor triad."""
        t = self._timeline(1.2)
        samples = np.zeros_like(t)
        for i, freq in enumerate((392, 311, 262)):
            start = i * 0.3
            note_t = t - start
            mask = t >= start
            samples += np.where(mask, np.exp(-note_t * 3) * np.sin(2 * np.pi * freq * t), 0.0)
        return self._create_sound_from_samples(samples, 0.7)

    def play(self, sound_name: str):
        """Play a sound effect by name."""
        if not self.enabled:
            return

        sound = self.sounds.get(sound_name)
        if sound:
            sound.play()

    def play_fire(self):
        self.play('fire')

    def play_hit(self):
        self.play('hit')

    def play_explosion(self):
        self.play('explosion')

    def play_life_lost(self):
        self.play('life_lost')

    def play_wave_cleared(self):
        self.play('wave_cleared')

    def play_game_over(self):
        self.play('game_over')

    def set_volume(self, volume: float):
        """Set master volume (0.0 to 1.0)."""
        self.volume = max(0.0, min(1.0, volume))
        for sound, level in self.levels:
            sound.set_volume(level * self.volume)

    def toggle_sound(self) -> bool:
        """Toggle sound on/off."""
        self.enabled = not self.enabled
        return self.enabled

    def is_enabled(self) -> bool:
        """Check if sound is enabled."""
        return self.enabled

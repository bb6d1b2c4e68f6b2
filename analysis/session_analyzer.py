"""
Session Log Analyzer for Beetle Invaders

Loads, summarises and plots the JSON session logs written by
session.SessionLogger. Use in Jupyter notebooks or standalone.

Usage:
    from analysis.session_analyzer import SessionAnalyzer

    analyzer = SessionAnalyzer()
    analyzer.load_session('session_logs/session_20261019_174455_120000.json')
    analyzer.plot_session_overview()
"""

import json
import os
import glob
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple
import numpy as np
import pandas as pd
import matplotlib.pyplot as plt
from matplotlib.gridspec import GridSpec


EVENT_TYPES = ['shot', 'enemy_hit', 'enemy_destroyed', 'life_lost', 'wave_cleared', 'game_over']

EVENT_COLORS = {
    'shot': '#9AA5B1',
    'enemy_hit': '#FFD93D',
    'enemy_destroyed': '#6BCB77',
    'life_lost': '#FF6B6B',
    'wave_cleared': '#4D96FF',
    'game_over': '#000000',
}

EVENT_MARKERS = {
    'shot': '|',
    'enemy_hit': 'o',
    'enemy_destroyed': '*',
    'life_lost': 'x',
    'wave_cleared': 'D',
    'game_over': 's',
}


@dataclass
class GameEvent:
    """A single logged gameplay event."""
    number: int
    event_type: str
    timestamp: str
    elapsed_seconds: float
    score: int
    lives: int
    wave: int
    position: Optional[Tuple[float, float]] = None
    details: Dict = field(default_factory=dict)


class SessionAnalyzer:
    """Analyzer for session log files."""

    def __init__(self):
        self.session_data = None
        self.events: List[GameEvent] = []
        self.session_file = None

    def load_session(self, filepath: str) -> bool:
        """
        Load a session log file.

        Args:
            filepath: Path to session JSON file

        Returns:
            True if loaded successfully
        """
        try:
            with open(filepath, 'r') as f:
                self.session_data = json.load(f)
            self.session_file = filepath
            self._parse_events()
            print(f"Loaded session: {self.session_data.get('session_id', 'unknown')}")
            print(f"  Duration: {self.session_data.get('duration_seconds', 0):.1f}s")
            print(f"  Events: {len(self.events)}")
            return True
        except (IOError, json.JSONDecodeError) as e:
            print(f"Error loading session: {e}")
            return False

    def _parse_events(self):
        """Parse raw event dicts into GameEvent objects."""
        self.events = []
        known = {'type', 'timestamp', 'elapsed_seconds', 'game_state', 'position'}

        for i, raw in enumerate(self.session_data.get('events', []), start=1):
            state = raw.get('game_state', {})
            position = raw.get('position')
            self.events.append(GameEvent(
                number=i,
                event_type=raw.get('type', ''),
                timestamp=raw.get('timestamp', ''),
                elapsed_seconds=raw.get('elapsed_seconds', 0),
                score=state.get('score', 0),
                lives=state.get('lives', 0),
                wave=state.get('wave', 0),
                position=tuple(position) if position else None,
                details={k: v for k, v in raw.items() if k not in known},
            ))

    def get_events(self, event_type: str) -> List[GameEvent]:
        """Get all events of one type, in order."""
        return [e for e in self.events if e.event_type == event_type]

    def get_wave_clear_times(self) -> np.ndarray:
        """
        Seconds each cleared wave took, measured from the previous clear
        (or the session start for the first wave).
        """
        times = np.array([e.elapsed_seconds for e in self.get_events('wave_cleared')], dtype=float)
        if times.size == 0:
            return times
        return np.diff(np.concatenate(([0.0], times)))

    def get_summary(self) -> Dict:
        """
        Get session summary statistics.

        Raises:
            ValueError: If no session has been loaded
        """
        if self.session_data is None:
            raise ValueError("No session loaded")

        shots = len(self.get_events('shot'))
        hits = len(self.get_events('enemy_hit'))
        clear_times = self.get_wave_clear_times()
        last = self.events[-1] if self.events else None

        return {
            'session_id': self.session_data.get('session_id', ''),
            'duration_seconds': self.session_data.get('duration_seconds', 0),
            'shots_fired': shots,
            'hits': hits,
            'accuracy': hits / shots * 100 if shots else 0.0,
            'enemies_destroyed': len(self.get_events('enemy_destroyed')),
            'lives_lost': len(self.get_events('life_lost')),
            'waves_cleared': int(clear_times.size),
            'avg_wave_clear_seconds': float(np.mean(clear_times)) if clear_times.size else 0.0,
            'fastest_wave_clear_seconds': float(np.min(clear_times)) if clear_times.size else 0.0,
            'final_score': self.session_data.get('final_score', last.score if last else 0),
            'final_wave': self.session_data.get('final_wave', last.wave if last else 1),
        }

    def to_dataframe(self) -> pd.DataFrame:
        """Convert events to a pandas DataFrame."""
        rows = []
        for e in self.events:
            rows.append({
                'event': e.number,
                'type': e.event_type,
                'elapsed_s': e.elapsed_seconds,
                'score': e.score,
                'lives': e.lives,
                'wave': e.wave,
                'x': e.position[0] if e.position else np.nan,
                'y': e.position[1] if e.position else np.nan,
            })
        return pd.DataFrame(rows, columns=['event', 'type', 'elapsed_s', 'score', 'lives', 'wave', 'x', 'y'])

    def events_per_wave(self) -> pd.DataFrame:
        """Count each event type per wave."""
        df = self.to_dataframe()
        if df.empty:
            return pd.DataFrame(columns=EVENT_TYPES)
        counts = df.pivot_table(index='wave', columns='type', values='event', aggfunc='count', fill_value=0)
        return counts.reindex(columns=EVENT_TYPES, fill_value=0)

    # ========== Plotting Methods ==========

    def plot_session_overview(self, figsize: Tuple[int, int] = (14, 9)):
        """
        Plot session overview with multiple subplots.

        Shows:
        - Event timeline
        - Score and lives progression
        - Wave clear times
        - Kill positions on the playfield

        Raises:
            ValueError: If the session has no events
        """
        if not self.events:
            raise ValueError("No events to plot")

        fig = plt.figure(figsize=figsize)
        gs = GridSpec(3, 2, figure=fig, hspace=0.4, wspace=0.3)

        self._plot_event_timeline(fig.add_subplot(gs[0, :]))
        self._plot_score_progression(fig.add_subplot(gs[1, 0]))
        self._plot_wave_clear_times(fig.add_subplot(gs[1, 1]))
        self._plot_kill_positions(fig.add_subplot(gs[2, :]))

        summary = self.get_summary()
        fig.suptitle(
            f"Session {summary['session_id']} | "
            f"{summary['waves_cleared']} waves | "
            f"{summary['accuracy']:.1f}% accuracy | "
            f"Score: {summary['final_score']}",
            fontsize=14, fontweight='bold'
        )
        return fig

    def _plot_event_timeline(self, ax):
        """Plot every event on a shared time axis, one lane per type."""
        for lane, event_type in enumerate(EVENT_TYPES):
            times = [e.elapsed_seconds for e in self.get_events(event_type)]
            if times:
                ax.scatter(times, [lane] * len(times), c=EVENT_COLORS[event_type],
                           marker=EVENT_MARKERS[event_type], s=60, label=event_type)
        ax.set_yticks(range(len(EVENT_TYPES)))
        ax.set_yticklabels(EVENT_TYPES)
        ax.set_xlabel('Time (seconds)')
        ax.set_title('Event Timeline')

    def _plot_score_progression(self, ax):
        """Plot score and lives over time."""
        times = [e.elapsed_seconds for e in self.events]
        ax.plot(times, [e.score for e in self.events], color='green', label='Score')
        ax.set_xlabel('Time (seconds)')
        ax.set_ylabel('Score')

        lives_ax = ax.twinx()
        lives_ax.step(times, [e.lives for e in self.events], color='red', where='post', alpha=0.6)
        lives_ax.set_ylabel('Lives')
        ax.set_title('Score & Lives')

    def _plot_wave_clear_times(self, ax):
        """Bar chart of how long each wave took."""
        clear_times = self.get_wave_clear_times()
        if clear_times.size:
            waves = np.arange(1, clear_times.size + 1)
            ax.bar(waves, clear_times, color=EVENT_COLORS['wave_cleared'], edgecolor='black', alpha=0.8)
            ax.axhline(y=np.mean(clear_times), color='black', linestyle='--',
                       label=f'Mean: {np.mean(clear_times):.1f}s')
            ax.legend()
        ax.set_xlabel('Wave')
        ax.set_ylabel('Seconds to clear')
        ax.set_title('Wave Clear Times')

    def _plot_kill_positions(self, ax):
        """Scatter where projectiles hit enemies and where enemies were destroyed."""
        for event_type in ('enemy_destroyed', 'enemy_hit'):
            points = np.array([e.position for e in self.get_events(event_type) if e.position], dtype=float)
            if points.size:
                ax.scatter(points[:, 0], points[:, 1], c=EVENT_COLORS[event_type],
                           marker=EVENT_MARKERS[event_type], s=50, label=event_type, edgecolors='black')
        ax.invert_yaxis()  # Screen coordinates grow downward
        ax.set_xlabel('X (px)')
        ax.set_ylabel('Y (px)')
        ax.set_title('Hit & Kill Positions')


def list_sessions(directory: str = 'session_logs') -> List[str]:
    """List all available session files, most recent first."""
    pattern = os.path.join(directory, 'session_*.json')
    files = sorted(glob.glob(pattern), reverse=True)

    print(f"Found {len(files)} session files:")
    for f in files[:10]:
        print(f"  {os.path.basename(f)}")

    if len(files) > 10:
        print(f"  ... and {len(files) - 10} more")

    return files


def compare_sessions(filepaths: List[str]) -> pd.DataFrame:
    """
    Compare multiple sessions side by side.

    Args:
        filepaths: List of session file paths

    Returns:
        DataFrame with one summary row per loadable session
    """
    data = []
    for fp in filepaths:
        analyzer = SessionAnalyzer()
        if analyzer.load_session(fp):
            summary = analyzer.get_summary()
            summary['file'] = os.path.basename(fp)
            data.append(summary)

    return pd.DataFrame(data)


if __name__ == '__main__':
    print("Session Analyzer - Quick Demo")
    print("=" * 40)

    sessions = list_sessions()

    if sessions:
        analyzer = SessionAnalyzer()
        analyzer.load_session(sessions[0])

        print("\nSession Summary:")
        for key, value in analyzer.get_summary().items():
            print(f"  {key}: {value}")

        print("\nEvents per wave:")
        print(analyzer.events_per_wave())

        if analyzer.events:
            analyzer.plot_session_overview()
            plt.show()

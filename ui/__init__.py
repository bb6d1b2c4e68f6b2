"""UI module containing visualization and interface components."""

from .colors import *
from .sprites import create_beetlemorph_sheet
from .game_ui import GameUI

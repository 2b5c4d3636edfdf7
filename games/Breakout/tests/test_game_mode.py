"""
Tests for the Breakout game mode and launcher wiring.

Rendering runs against an off-screen pygame Surface; no window is opened.
"""

import pygame
import pytest

from playkit.games import GameState
from playkit.games.input import InputFrame
from games.Breakout.game_mode import BreakoutMode
from games.Breakout.game.skins import ClassicSkin, block_color_tag
from games.Breakout.config import COLORS
from games.Breakout.main import build_parser, main


@pytest.fixture
def game():
    return BreakoutMode(seed=7, width=800, height=600)


class TestMetadata:
    """Game info and CLI arguments."""

    def test_info(self):
        info = BreakoutMode.get_info()
        assert info['name'] == 'Breakout'
        assert info['version'] == '1.0.0'

    def test_arguments_include_seed(self):
        names = [arg['name'] for arg in BreakoutMode.get_arguments()]
        assert names == ['--skin', '--lives', '--seed']

    def test_parser_reads_options(self):
        args = build_parser().parse_args(['--seed', '3', '--lives', '5', '--width', '640'])
        assert args.seed == 3
        assert args.lives == 5
        assert args.width == 640
        assert args.skin == 'classic'

    def test_main_rejects_zero_lives(self):
        with pytest.raises(SystemExit):
            main(['--lives', '0'])


class TestFlow:
    """Input and update through the mode."""

    def test_starts_in_menu(self, game):
        assert game.state is GameState.MENU
        assert game.get_score() == 0

    def test_confirm_starts_game(self, game):
        game.handle_input(InputFrame(confirm=True))
        game.update(0.016)
        assert game.state is GameState.GAME
        assert game.last_report is None

    def test_confirm_consumed_after_one_update(self, game):
        game.handle_input(InputFrame(confirm=True))
        game.update(0.016)
        game.update(0.016)
        assert game.state is GameState.GAME
        assert game.last_report is not None

    def test_same_seed_same_grid(self):
        first = BreakoutMode(seed=11)
        second = BreakoutMode(seed=11)
        kinds = [b.kind for b in first.session.blocks]
        assert kinds == [b.kind for b in second.session.blocks]

    def test_reset_uses_current_screen_size(self, game):
        game.handle_input(InputFrame(confirm=True))
        game.update(0.0)
        game.session.transition(GameState.DEAD)

        game.set_screen_size(1000, 700)
        game.handle_input(InputFrame(confirm=True))
        game.update(0.0)

        assert game.state is GameState.MENU
        assert game.session.player.rect.x == 425.0

    def test_custom_lives(self):
        game = BreakoutMode(lives=5)
        assert game.session.lives == 5


class TestRender:
    """Drawing to an off-screen surface."""

    @pytest.fixture
    def screen(self):
        return pygame.Surface((800, 600))

    def test_menu_frame_colors(self, game, screen):
        game.render(screen)

        assert tuple(screen.get_at((400, 520)))[:3] == COLORS['player'].as_rgb_tuple
        assert tuple(screen.get_at((400, 440)))[:3] == COLORS['ball'].as_rgb_tuple
        assert tuple(screen.get_at((0, 599)))[:3] == COLORS['background'].as_rgb_tuple

        first = game.session.blocks[0]
        expected = COLORS[block_color_tag(first)].as_rgb_tuple
        assert tuple(screen.get_at((95, 60)))[:3] == expected

    @pytest.mark.parametrize("state", [GameState.GAME, GameState.DEAD, GameState.LEVEL_COMPLETED])
    def test_every_state_renders(self, game, screen, state):
        game.session.state = state
        game.render(screen)
        assert tuple(screen.get_at((400, 520)))[:3] == COLORS['player'].as_rgb_tuple

    def test_skin_resolves_tags_to_rgb(self):
        assert ClassicSkin().color('block_spawner') == (0, 228, 48)


class TestSkinSelection:
    """Skin lookup by name."""

    def test_unknown_skin_falls_back_to_classic(self, capsys):
        game = BreakoutMode(skin='neon')
        assert "Unknown skin 'neon'" in capsys.readouterr().out
        assert game.get_score() == 0

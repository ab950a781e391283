"""Unit tests for the game session state machine."""

import pytest
from sudoku_game.generator import Difficulty, GenerationError
from sudoku_game.session import GameSession, GameState, MAX_MISTAKES

from conftest import FixedGenerator, empty_cells, wrong_digit


def fill_correctly(session, cells):
    for row, col in cells:
        session.select_cell(row, col)
        session.place_digit(session.solution.get(row, col))


class FailingGenerator(FixedGenerator):
    """Serves the first game, then fails every later one."""

    def generate(self, difficulty=Difficulty.EASY):
        if self.calls:
            self.calls.append(difficulty)
            raise GenerationError("out of luck")
        return super().generate(difficulty)


class TestNewGame:
    """Tests for starting and replacing games."""

    def test_starts_playing(self, fixed_session):
        assert fixed_session.state is GameState.PLAYING
        assert fixed_session.is_playing
        assert not fixed_session.is_won
        assert not fixed_session.is_game_over
        assert fixed_session.selected is None
        assert fixed_session.mistakes == 0

    def test_easy_game_has_51_initial_cells(self, seeded_session):
        initial = [c for row in seeded_session.board for c in row if c.is_initial]
        assert len(initial) == 51

    def test_new_game_resets_everything(self, fixed_session):
        for row, col in empty_cells(fixed_session)[:MAX_MISTAKES]:
            fixed_session.select_cell(row, col)
            fixed_session.place_digit(wrong_digit(fixed_session, row, col))
        assert fixed_session.state is GameState.LOST

        fixed_session.new_game(Difficulty.HARD)

        assert fixed_session.state is GameState.PLAYING
        assert fixed_session.mistakes == 0
        assert fixed_session.selected is None
        assert fixed_session.difficulty is Difficulty.HARD
        assert len(empty_cells(fixed_session)) == 51

    def test_new_game_keeps_difficulty_by_default(self):
        generator = FixedGenerator()
        session = GameSession(Difficulty.EXPERT, generator)
        session.new_game()
        assert generator.calls == [Difficulty.EXPERT, Difficulty.EXPERT]

    def test_new_game_replaces_grids(self, seeded_session):
        old_solution = seeded_session.solution
        seeded_session.new_game()
        assert seeded_session.solution != old_solution

    def test_failed_new_game_keeps_current_game(self):
        session = GameSession(Difficulty.EASY, FailingGenerator())
        session.select_cell(0, 2)
        session.place_digit(9)
        before = session.snapshot()

        with pytest.raises(GenerationError):
            session.new_game(Difficulty.EXPERT)

        assert session.difficulty is Difficulty.EASY
        assert session.snapshot() == before
        assert session.mistakes == 1
        assert "easy" in repr(session)

    def test_solution_accessor_is_a_copy(self, fixed_session):
        solution = fixed_session.solution
        solution.set(0, 0, 9)
        assert fixed_session.solution.get(0, 0) == 5


class TestSelectCell:

    def test_select(self, fixed_session):
        fixed_session.select_cell(4, 7)
        assert fixed_session.selected == (4, 7)

    def test_select_initial_cell_allowed(self, fixed_session):
        fixed_session.select_cell(0, 0)
        assert fixed_session.selected == (0, 0)

    @pytest.mark.parametrize("row,col", [(-1, 0), (0, 9), (9, 9)])
    def test_select_out_of_bounds(self, fixed_session, row, col):
        with pytest.raises(ValueError):
            fixed_session.select_cell(row, col)

    def test_select_ignored_after_game_ends(self, fixed_session):
        for row, col in empty_cells(fixed_session)[:MAX_MISTAKES]:
            fixed_session.select_cell(row, col)
            fixed_session.place_digit(wrong_digit(fixed_session, row, col))
        last = fixed_session.selected

        fixed_session.select_cell(8, 8)
        assert fixed_session.selected == last

    def test_out_of_bounds_raises_after_game_ends(self, fixed_session):
        for row, col in empty_cells(fixed_session)[:MAX_MISTAKES]:
            fixed_session.select_cell(row, col)
            fixed_session.place_digit(wrong_digit(fixed_session, row, col))
        assert fixed_session.is_game_over
        before = fixed_session.snapshot()

        with pytest.raises(ValueError):
            fixed_session.select_cell(9, 0)
        with pytest.raises(ValueError):
            fixed_session.place_digit(0)
        assert fixed_session.snapshot() == before


class TestPlaceDigit:
    """Tests for placing digits and judging them."""

    def test_correct_digit(self, fixed_session):
        fixed_session.select_cell(0, 2)
        fixed_session.place_digit(4)

        cell = fixed_session.cell(0, 2)
        assert cell.value == 4
        assert not cell.is_error
        assert fixed_session.mistakes == 0

    def test_wrong_digit(self, fixed_session):
        fixed_session.select_cell(0, 2)
        fixed_session.place_digit(9)

        cell = fixed_session.cell(0, 2)
        assert cell.value == 9
        assert cell.is_error
        assert fixed_session.mistakes == 1
        assert fixed_session.state is GameState.PLAYING

    def test_correcting_a_mistake_keeps_the_count(self, fixed_session):
        fixed_session.select_cell(0, 2)
        fixed_session.place_digit(9)
        fixed_session.place_digit(4)

        assert not fixed_session.cell(0, 2).is_error
        assert fixed_session.mistakes == 1

    def test_rejects_bad_digit(self, fixed_session):
        fixed_session.select_cell(0, 2)
        with pytest.raises(ValueError):
            fixed_session.place_digit(0)
        with pytest.raises(ValueError):
            fixed_session.place_digit(10)

    def test_three_mistakes_lose(self, fixed_session):
        targets = empty_cells(fixed_session)[:MAX_MISTAKES]
        for n, (row, col) in enumerate(targets, 1):
            fixed_session.select_cell(row, col)
            fixed_session.place_digit(wrong_digit(fixed_session, row, col))
            assert fixed_session.mistakes == n

        assert fixed_session.state is GameState.LOST
        assert fixed_session.is_game_over
        assert not fixed_session.is_won

    def test_mistakes_never_decrease(self, fixed_session):
        row, col = empty_cells(fixed_session)[0]
        fixed_session.select_cell(row, col)
        fixed_session.place_digit(wrong_digit(fixed_session, row, col))
        fixed_session.clear_cell()
        fixed_session.place_digit(fixed_session.solution.get(row, col))

        assert fixed_session.mistakes == 1

    def test_easy_scenario(self, seeded_session):
        """Right digit, then three wrong ones on different cells."""
        first, second, third, fourth = empty_cells(seeded_session)[:4]

        seeded_session.select_cell(*first)
        seeded_session.place_digit(seeded_session.solution.get(*first))
        assert not seeded_session.cell(*first).is_error
        assert seeded_session.mistakes == 0

        seeded_session.select_cell(*second)
        seeded_session.place_digit(wrong_digit(seeded_session, *second))
        assert seeded_session.cell(*second).is_error
        assert seeded_session.mistakes == 1

        for pos in (third, fourth):
            seeded_session.select_cell(*pos)
            seeded_session.place_digit(wrong_digit(seeded_session, *pos))

        assert seeded_session.mistakes == 3
        assert seeded_session.state is GameState.LOST


class TestWinning:

    def test_filling_everything_correctly_wins(self, seeded_session):
        fill_correctly(seeded_session, empty_cells(seeded_session))

        assert seeded_session.state is GameState.WON
        assert seeded_session.is_won
        assert not seeded_session.is_game_over
        assert seeded_session.mistakes == 0

    def test_not_won_before_last_cell(self, fixed_session):
        cells = empty_cells(fixed_session)
        fill_correctly(fixed_session, cells[:-1])
        assert fixed_session.state is GameState.PLAYING

        fill_correctly(fixed_session, cells[-1:])
        assert fixed_session.state is GameState.WON

    def test_wrong_last_digit_does_not_win(self, fixed_session):
        cells = empty_cells(fixed_session)
        fill_correctly(fixed_session, cells[:-1])

        row, col = cells[-1]
        fixed_session.select_cell(row, col)
        fixed_session.place_digit(wrong_digit(fixed_session, row, col))

        assert fixed_session.state is GameState.PLAYING
        assert fixed_session.mistakes == 1

    def test_full_board_with_earlier_error_wins(self, fixed_session):
        """Only the final placement is judged; the board just has to be full."""
        cells = empty_cells(fixed_session)
        row, col = cells[0]
        fixed_session.select_cell(row, col)
        fixed_session.place_digit(wrong_digit(fixed_session, row, col))

        fill_correctly(fixed_session, cells[1:])

        assert fixed_session.state is GameState.WON
        assert fixed_session.cell(row, col).is_error

    def test_clear_never_wins(self, fixed_session):
        cells = empty_cells(fixed_session)
        fill_correctly(fixed_session, cells[:-1])

        row, col = cells[-1]
        fixed_session.select_cell(row, col)
        fixed_session.place_digit(wrong_digit(fixed_session, row, col))
        fixed_session.clear_cell()

        assert fixed_session.state is GameState.PLAYING
        assert fixed_session.cell(row, col).value == 0

    def test_moves_ignored_after_win(self, fixed_session):
        cells = empty_cells(fixed_session)
        fill_correctly(fixed_session, cells)
        before = fixed_session.snapshot()

        fixed_session.clear_cell()
        fixed_session.place_digit(1)

        assert fixed_session.snapshot() == before


class TestClearCell:

    def test_clear(self, fixed_session):
        fixed_session.select_cell(0, 2)
        fixed_session.place_digit(9)
        fixed_session.clear_cell()

        cell = fixed_session.cell(0, 2)
        assert cell.value == 0
        assert not cell.is_error
        assert fixed_session.mistakes == 1

    def test_clear_empty_cell(self, fixed_session):
        fixed_session.select_cell(0, 2)
        before = fixed_session.snapshot()
        fixed_session.clear_cell()
        assert fixed_session.snapshot() == before


class TestNoOps:
    """Rule-breaking moves leave the whole session untouched."""

    def test_place_without_selection(self, fixed_session):
        before = fixed_session.snapshot()
        fixed_session.place_digit(4)
        assert fixed_session.snapshot() == before

    def test_clear_without_selection(self, fixed_session):
        before = fixed_session.snapshot()
        fixed_session.clear_cell()
        assert fixed_session.snapshot() == before

    def test_place_on_initial_cell(self, fixed_session):
        fixed_session.select_cell(0, 0)
        before = fixed_session.snapshot()
        fixed_session.place_digit(9)
        assert fixed_session.snapshot() == before

    def test_clear_initial_cell(self, fixed_session):
        fixed_session.select_cell(0, 0)
        before = fixed_session.snapshot()
        fixed_session.clear_cell()
        assert fixed_session.snapshot() == before
        assert fixed_session.cell(0, 0).value == 5

    def test_moves_ignored_after_loss(self, fixed_session):
        targets = empty_cells(fixed_session)[:MAX_MISTAKES + 1]
        for row, col in targets[:MAX_MISTAKES]:
            fixed_session.select_cell(row, col)
            fixed_session.place_digit(wrong_digit(fixed_session, row, col))
        before = fixed_session.snapshot()

        fixed_session.place_digit(1)
        fixed_session.clear_cell()
        fixed_session.select_cell(*targets[-1])
        fixed_session.place_digit(fixed_session.solution.get(*targets[-1]))

        assert fixed_session.snapshot() == before
        assert fixed_session.mistakes == MAX_MISTAKES


if __name__ == "__main__":
    pytest.main([__file__, "-v"])

"""
Testing statistics over a record of finished games.
"""

from guessword.stats import GameStatistics, result_marker

from helpers import fresh_game, in_progress_game, won_game, lost_game

def test_empty_record():
    stats = GameStatistics()
    assert stats.games_played == 0
    assert stats.games_won == 0
    assert stats.percentage_won == 0
    assert stats.current_win_streak == 0
    assert stats.max_win_streak == 0
    assert stats.win_distribution == [0, 0, 0, 0, 0, 0]

def test_record_with_wins_and_losses():
    stats = GameStatistics(record=["3", "4", "L", "2", "3", "3", "L", "6"])
    assert stats.games_played == 8
    assert stats.games_won == 6
    assert stats.percentage_won == 75
    assert stats.current_win_streak == 1
    assert stats.max_win_streak == 3
    assert stats.win_distribution == [0, 1, 3, 1, 0, 1]

def test_longest_streak_survives_a_later_shorter_one():
    stats = GameStatistics(record=["1", "2", "3", "L", "4", "L"])
    assert stats.max_win_streak == 3
    assert stats.current_win_streak == 0

def test_percentage_is_rounded():
    stats = GameStatistics(record=["1", "L", "L"])
    assert stats.percentage_won == 33

def test_result_marker():
    assert result_marker(fresh_game()) is None
    assert result_marker(in_progress_game()) is None
    assert result_marker(won_game()) == "3"
    assert result_marker(lost_game()) == "L"

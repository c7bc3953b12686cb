import json

import pytest_mock

import main
from profiles import Difficulty, ProfileRecord


def test_main_should_print_profiles_as_json(mocker: pytest_mock.MockerFixture, capsys):
    # arrange
    mocker.patch("main.setup_logging")
    fetch_all = mocker.patch(
        "main.fetch_all_profiles",
        return_value=[ProfileRecord("alice", {Difficulty.HARD: 2}, {Difficulty.HARD: 10.0})],
    )

    # act
    exit_code = main.main(["alice"])

    # assert
    assert exit_code == 0
    assert fetch_all.await_args.args[0] == ["alice"]
    assert json.loads(capsys.readouterr().out) == [
        {
            "username": "alice",
            "submitCounts": {"Hard": 2},
            "beatsPercentage": {"Hard": 10.0},
        }
    ]


def test_main_should_use_watchlist_without_arguments(mocker: pytest_mock.MockerFixture, capsys):
    # arrange
    mocker.patch("main.setup_logging")
    mocker.patch("main.load_usernames", return_value=["bob"])
    fetch_all = mocker.patch("main.fetch_all_profiles", return_value=[])

    # act
    main.main([])

    # assert
    assert fetch_all.await_args.args[0] == ["bob"]
    assert json.loads(capsys.readouterr().out) == []

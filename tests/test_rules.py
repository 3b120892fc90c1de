"""
Tests for the rules API: legal actions, applying actions and agent-driven turns.
"""

import pytest

from dominoes import ActionType, BoardSide, GameConfig, Tile, create_game
from dominoes.events import EventType
from dominoes.exceptions import InvalidActionError
from dominoes.rules import Action, apply_action, get_legal_actions, play_round, step_turn

from conftest import FirstLegalAgent, ScriptedAgent, make_agents, tile_count


def test_no_actions_before_first_round(game_config, two_players):
    game = create_game(game_config, two_players)
    assert get_legal_actions(game, 0) == []
    assert get_legal_actions(game, 1) == []


def test_legal_actions_list_every_tile_and_side(basic_game, rig):
    rig(basic_game, hands={0: [(6, 2), (0, 1), (5, 6)], 1: [(4, 4)]}, board=[((6, 4), "left")])

    actions = get_legal_actions(basic_game, 0)

    assert actions == [
        Action(ActionType.PLAY_TILE, index=0, side=BoardSide.LEFT),
        Action(ActionType.PLAY_TILE, index=2, side=BoardSide.LEFT),
    ]


def test_legal_actions_both_sides_for_matching_ends(basic_game, rig):
    rig(basic_game, hands={0: [(3, 1)], 1: [(4, 4)]}, board=[((3, 3), "left")])

    actions = get_legal_actions(basic_game, 0)

    assert {a.params["side"] for a in actions} == {BoardSide.LEFT, BoardSide.RIGHT}


def test_pass_is_only_action_when_blocked(basic_game, rig):
    rig(basic_game, hands={0: [(0, 1)], 1: [(4, 4)]}, board=[((6, 6), "left")])
    assert get_legal_actions(basic_game, 0) == [Action(ActionType.PASS)]


def test_other_player_has_no_actions(basic_game, rig):
    rig(basic_game, hands={0: [(6, 1)], 1: [(6, 4)]}, board=[((6, 6), "left")], current=0)
    assert get_legal_actions(basic_game, 1) == []


def test_apply_action_accepts_side_as_string(basic_game, rig):
    rig(basic_game, hands={0: [(6, 1), (2, 2)], 1: [(4, 4)]}, board=[((6, 6), "left")])

    assert apply_action(basic_game, Action(ActionType.PLAY_TILE, index=0, side="right"))
    assert basic_game.board.right_end == 1


def test_apply_action_rejects_unknown_side(basic_game, rig):
    rig(basic_game, hands={0: [(6, 1), (2, 2)], 1: [(4, 4)]}, board=[((6, 6), "left")])

    assert not apply_action(basic_game, Action(ActionType.PLAY_TILE, index=0, side="up"))
    assert len(basic_game.board) == 1


def test_pass_rejected_while_holding_playable_tile(basic_game, rig):
    rig(basic_game, hands={0: [(6, 1)], 1: [(4, 4)]}, board=[((6, 6), "left")])

    assert not apply_action(basic_game, Action(ActionType.PASS), player_id=0)
    assert basic_game.consecutive_passes == 0


def test_step_turn_passes_without_asking_agent(basic_game, rig):
    rig(basic_game, hands={0: [(0, 1)], 1: [(4, 4)]}, board=[((6, 6), "left")])
    agent = ScriptedAgent(0, "Alice", [])

    action = step_turn(basic_game, agent)

    assert action == Action(ActionType.PASS)
    assert agent.calls == 0
    assert basic_game.consecutive_passes == 1


def test_step_turn_reprompts_after_illegal_choice(basic_game, rig):
    rig(basic_game, hands={0: [(6, 1), (2, 3)], 1: [(4, 4)]}, board=[((6, 5), "left")])
    agent = ScriptedAgent(
        0,
        "Alice",
        [
            Action(ActionType.PLAY_TILE, index=1, side=BoardSide.LEFT),
            Action(ActionType.PASS),
            Action(ActionType.PLAY_TILE, index=0, side=BoardSide.LEFT),
        ],
    )

    action = step_turn(basic_game, agent)

    assert agent.calls == 3
    assert action.params["index"] == 0
    assert basic_game.board.left_end == 1
    assert basic_game.hand(0) == (Tile(2, 3),)


def test_step_turn_gives_up_on_stubborn_agent(two_players, rig):
    game = create_game(GameConfig(seed=1, max_invalid_choices=3), two_players)
    game.start_round()
    rig(game, hands={0: [(6, 1), (2, 3)], 1: [(4, 4)]}, board=[((6, 5), "left")])
    bad = Action(ActionType.PLAY_TILE, index=1, side=BoardSide.RIGHT)
    agent = ScriptedAgent(0, "Alice", [bad] * 5)

    with pytest.raises(InvalidActionError):
        step_turn(game, agent)

    assert agent.calls == 3
    assert len(game.board) == 1
    assert game.get_current_player().player_id == 0


def test_step_turn_is_noop_after_round_end(basic_game, rig):
    rig(basic_game, hands={0: [(6, 6)], 1: [(0, 0)]}, board=[((3, 4), "left")])
    basic_game.pass_turn(0)
    basic_game.pass_turn(1)
    events_before = len(basic_game.event_log.events)

    assert step_turn(basic_game, FirstLegalAgent(0, "Alice")) is None
    assert len(basic_game.event_log.events) == events_before


def test_tiles_conserved_through_a_full_round(game_config, four_players):
    game = create_game(game_config, four_players)
    counts = []
    game.event_log.subscribe(
        lambda e: counts.append(tile_count(game)) if e.event_type == EventType.TILE_PLAYED else None
    )

    play_round(game, make_agents(four_players))

    assert game.round_over
    assert counts
    assert set(counts) == {28}


def test_play_round_requires_an_agent_per_player(basic_game, two_players):
    with pytest.raises(InvalidActionError):
        play_round(basic_game, make_agents(two_players[:1]))


def test_full_game_reaches_target(three_players):
    game = create_game(GameConfig(seed=11, target_score=100), three_players)
    agents = make_agents(three_players)

    for _ in range(200):
        if game.game_over:
            break
        play_round(game, agents)

    assert game.game_over
    winner = game.players[game.winner]
    assert winner.score >= 100
    # Winner is the first seat at or above target
    for player in game.players_in_order():
        if player.player_id == game.winner:
            break
        assert player.score < 100

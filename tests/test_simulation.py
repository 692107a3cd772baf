from flappy.constants import GAP_SIZE, GRAVITY, SPAWN_X
from flappy.data_models import GameState, Obstacle, ObstacleRole
from flappy.simulation import Simulation


def hold_level(sim):
    """Cancels gravity for the next tick so the character keeps its height."""
    sim.character.velocity = -GRAVITY


def test_initial_state(sim):
    assert sim.state is GameState.RUNNING
    assert sim.obstacles == []
    assert sim.score == 0
    assert (sim.character.x, sim.character.y, sim.character.velocity) == (45, 320, 0)


def test_velocity_grows_by_gravity_each_tick(sim):
    velocities = []
    for _ in range(10):
        sim.tick()
        velocities.append(sim.character.velocity)
    assert velocities == [float(GRAVITY * n) for n in range(1, 11)]
    assert sim.character.y == 320 + sum(range(1, 11))


def test_y_never_negative(sim):
    for i in range(120):
        if i % 5 == 0:
            sim.flap()
        sim.tick()
        assert sim.character.y >= 0
    assert not sim.game_over


def test_flap_overrides_velocity_without_moving(sim):
    sim.character.velocity = 17
    assert sim.flap() == -25
    assert sim.character.velocity == -25
    assert sim.character.y == 320


def test_flap_ignored_when_over(sim):
    sim.game_over = True
    sim.character.velocity = 5
    sim.flap()
    assert sim.character.velocity == 5


def test_tick_is_noop_when_over(sim):
    sim.game_over = True
    sim.tick()
    assert sim.character.y == 320
    assert sim.tick_count == 0


def test_falling_off_board_ends_game(sim):
    sim.character.y = 640
    assert sim.tick() is GameState.OVER


def test_free_fall_ends_game_after_25_ticks(sim):
    ticks = 0
    while not sim.game_over:
        sim.tick()
        ticks += 1
    assert ticks == 25


def test_collision_ends_game(sim):
    sim.obstacles.append(Obstacle(x=50, y=300))
    sim.tick()
    assert sim.state is GameState.OVER


def test_score_awarded_once_per_obstacle(sim):
    sim.obstacles.append(Obstacle(x=-15, y=2000, height=10))
    hold_level(sim)
    sim.tick()
    # Right edge now exactly at the character's x
    assert sim.obstacles[0].right == 45
    assert sim.score == 0

    hold_level(sim)
    sim.tick()
    assert sim.obstacles[0].passed
    assert sim.score == 0.5

    for _ in range(5):
        hold_level(sim)
        sim.tick()
    assert sim.score == 0.5


def test_off_screen_obstacles_pruned(sim):
    sim.obstacles.append(Obstacle(x=-63, y=2000, height=10))
    sim.tick()
    assert sim.obstacles == []
    assert sim.score == 0.5


def test_spawn_pair_geometry(sim):
    top, bottom = sim.spawn_obstacle_pair(-200)
    assert sim.obstacles == [top, bottom]
    assert top.role is ObstacleRole.TOP
    assert bottom.role is ObstacleRole.BOTTOM
    assert top.x == bottom.x == SPAWN_X
    assert top.y == -200
    assert bottom.y == top.y + top.height + GAP_SIZE == 472
    assert not top.passed and not bottom.passed


def test_three_pairs_score_three(sim):
    for i in range(160):
        if i in (0, 30, 60):
            sim.spawn_obstacle_pair(-250)
        hold_level(sim)
        sim.tick()
    assert not sim.game_over
    assert sim.score == 3.0


def test_obstacle_list_stays_bounded(sim):
    for i in range(2000):
        if i % 90 == 0:
            sim.spawn_obstacle_pair(-250)
        hold_level(sim)
        sim.tick()
        assert len(sim.obstacles) <= 4
    assert not sim.game_over
    assert sim.score == 22.0


def test_restart_resets_everything(sim):
    sim.spawn_obstacle_pair(-250)
    sim.score = 4.5
    sim.character.y = 12
    sim.character.velocity = 9
    sim.tick_count = 37
    sim.game_over = True

    sim.restart()

    assert sim.obstacles == []
    assert sim.score == 0
    assert sim.tick_count == 0
    assert sim.state is GameState.RUNNING
    assert (sim.character.x, sim.character.y, sim.character.velocity) == (45, 320, 0)


def test_press_flaps_then_restarts(sim):
    assert sim.press() is GameState.RUNNING
    assert sim.character.velocity == -25

    sim.game_over = True
    sim.score = 2
    assert sim.press() is GameState.RUNNING
    assert sim.score == 0
    assert sim.character.velocity == 0


def test_snapshot(sim):
    sim.spawn_obstacle_pair(-300)
    snap = sim.snapshot()
    assert snap["character"] == (45, 320, 34, 24)
    assert snap["score"] == 0
    assert snap["game_over"] is False
    assert [o["role"] for o in snap["obstacles"]] == ["top", "bottom"]
    assert snap["obstacles"][0]["rect"] == (360, -300, 64, 512)

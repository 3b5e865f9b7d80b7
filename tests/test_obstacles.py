from conftest import ScriptedRandom

from endless_runner.config.settings import ObstacleSettings
from endless_runner.game.entities import Obstacle
from endless_runner.game.obstacles import ObstacleManager


def make_manager(samples=()):
    return ObstacleManager(ObstacleSettings(), ScriptedRandom(samples))


def test_spawns_at_right_edge_on_ground(viewport):
    manager = make_manager([0.01])
    obstacle = manager.maybe_spawn(0.015, viewport)

    assert obstacle is not None
    assert obstacle.x == viewport.width
    assert obstacle.y == viewport.ground_y - 40
    assert (obstacle.width, obstacle.height) == (30, 40)
    assert len(manager) == 1


def test_no_spawn_when_sample_not_below_rate(viewport):
    manager = make_manager([0.015, 0.5])
    assert manager.maybe_spawn(0.015, viewport) is None
    assert manager.maybe_spawn(0.015, viewport) is None
    assert len(manager) == 0


def test_one_sample_per_trial(viewport):
    rng = ScriptedRandom()
    manager = ObstacleManager(ObstacleSettings(), rng)
    for _ in range(5):
        manager.maybe_spawn(0.5, viewport)
    assert rng.calls == 5


def test_advance_moves_left():
    manager = make_manager()
    manager.add(Obstacle(x=100, y=0))
    manager.advance(7.5)
    assert manager.obstacles[0].x == 92.5


def test_prune_fully_offscreen_only():
    manager = make_manager()
    gone = Obstacle(x=-31, y=0, width=30)
    kept = Obstacle(x=-29, y=0, width=30)
    manager.add(gone)
    manager.add(kept)

    assert manager.prune() == 1
    assert manager.obstacles == (kept,)


def test_prune_adjacent_obstacles():
    manager = make_manager()
    for x in (-100, -90, -80, 10, -70, 20):
        manager.add(Obstacle(x=x, y=0, width=30))

    manager.prune()
    assert [o.x for o in manager] == [10, 20]


def test_clear():
    manager = make_manager()
    manager.add(Obstacle(x=1, y=0))
    manager.clear()
    assert len(manager) == 0

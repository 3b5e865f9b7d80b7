from endless_runner.game.collision import first_hit, is_colliding
from endless_runner.game.entities import Box, Obstacle


PLAYER = Box(10, 10, 30, 30)


def test_overlap_on_both_axes_collides():
    assert is_colliding(PLAYER, Box(35, 20, 30, 40))


def test_touching_edge_does_not_collide():
    # 10 + 30 == 40, not > 40
    assert not is_colliding(PLAYER, Box(40, 20, 30, 40))


def test_touching_top_does_not_collide():
    assert not is_colliding(PLAYER, Box(10, 40, 30, 40))


def test_overlap_on_one_axis_only():
    assert not is_colliding(PLAYER, Box(20, 100, 30, 40))


def test_first_hit_short_circuits():
    far = Obstacle(x=300, y=10)
    hit = Obstacle(x=20, y=10)
    also = Obstacle(x=25, y=10)
    assert first_hit(PLAYER, [far, hit, also]) is hit


def test_first_hit_none():
    assert first_hit(PLAYER, [Obstacle(x=500, y=10)]) is None
    assert first_hit(PLAYER, []) is None

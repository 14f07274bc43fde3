import pytest

from eightball.core import Vec2
from eightball.objects import Ball
from eightball.physics import GameObject
from eightball.scene import PHYSICS_SUBSTEPS, Scene


class _Recorder(GameObject):
    def __init__(self, name="rec"):
        super().__init__(name)
        self.physics_steps = []
        self.logic_steps = []

    def update(self, delta_time):
        self.logic_steps.append(delta_time)

    def physics_update(self, delta_time):
        self.physics_steps.append(delta_time)

    def render(self, renderer):
        renderer.append(self.name)


class _Screen(Scene):
    def enter(self):
        self.entered = True

    def exit(self):
        self.entered = False

    def handle_input(self, event):
        self.last_event = event


def test_scene_is_abstract():
    with pytest.raises(TypeError):
        Scene()


def test_instantiate_returns_object_and_registers_physics_only():
    scene = _Screen()
    recorder = scene.instantiate(_Recorder())
    ball = scene.instantiate(Ball("b", 1, Vec2(100.0, 100.0)))
    assert scene.game_objects == [recorder, ball]
    assert scene.physics_system.bodies == [ball]


def test_update_runs_substeps_then_logic_once():
    scene = _Screen()
    recorder = scene.instantiate(_Recorder())
    resting = scene.instantiate(Ball("rest", 3, Vec2(300.0, 300.0)))
    Scene.update(scene, 0.2)
    assert recorder.physics_steps == pytest.approx([0.2 / PHYSICS_SUBSTEPS] * PHYSICS_SUBSTEPS)
    assert recorder.logic_steps == [0.2]
    assert resting.transform.position == Vec2(300.0, 300.0)


def test_render_in_insertion_order():
    scene = _Screen()
    scene.instantiate(_Recorder("first"))
    scene.instantiate(_Recorder("second"))
    drawn = []
    Scene.render(scene, drawn)
    assert drawn == ["first", "second"]


def test_physics_update_separates_overlapping_balls():
    scene = _Screen()
    a = scene.instantiate(Ball("a", 1, Vec2(100.0, 100.0)))
    b = scene.instantiate(Ball("b", 2, Vec2(120.0, 100.0)))
    a.rigidbody.velocity = Vec2(50.0, 0.0)
    b.rigidbody.velocity = Vec2(-50.0, 0.0)
    scene.physics_update(0.01)
    assert abs(b.transform.position - a.transform.position) > 20.0
    assert a.rigidbody.velocity.x < 0.0
    assert b.rigidbody.velocity.x > 0.0


def test_moving_ball_advances_and_collider_follows():
    scene = _Screen()
    ball = scene.instantiate(Ball("a", 1, Vec2(100.0, 100.0)))
    ball.rigidbody.velocity = Vec2(100.0, 0.0)
    scene.update(0.1)
    assert ball.transform.position.x > 100.0
    assert ball.collider.center.x == ball.transform.position.x
import pytest

from imge.services import Audio, Input, Key, MouseButton, Screen, Time


class StubScreen(Screen):
    def __init__(self):
        self.opened = False

    def init(self, width, height, title="IMGE Game"):
        self.opened = True

    def clear(self):
        pass

    def present(self):
        pass

    def set_background_color(self, color):
        pass

    def set_background_image(self, filename):
        pass

    def is_open(self):
        return self.opened

    def close(self):
        self.opened = False

    def set_color(self, r, g, b, a=255):
        pass

    def draw_rect(self, x, y, width, height):
        pass

    def draw_rect_outline(self, x, y, width, height):
        pass

    def draw_texture(self, texture, x, y, width, height):
        pass

    def load_texture(self, filename):
        return None


class StubInput(Input):
    def __init__(self):
        self.keys = set()

    def update(self):
        pass

    def is_key_pressed(self, key):
        return key in self.keys

    def is_key_just_pressed(self, key):
        return False

    def is_key_just_released(self, key):
        return False

    def mouse_position(self):
        return (0, 0)

    def is_mouse_button_pressed(self, button):
        return False

    def is_mouse_button_just_pressed(self, button):
        return False

    def is_mouse_button_just_released(self, button):
        return False

    def mouse_wheel(self):
        return (0.0, 0.0)


class StubAudio(Audio):
    def __init__(self):
        self.playing = False

    def init(self):
        pass

    def play_music(self, filename, loop=True, fade_in=0.0, volume=1.0):
        self.playing = True

    def stop_music(self, fade_out=0.0):
        self.playing = False

    def pause_music(self):
        self.playing = False

    def resume_music(self):
        self.playing = True

    def is_music_playing(self):
        return self.playing

    def set_music_volume(self, volume):
        pass

    def play_sound(self, filename, volume=1.0, loop=False):
        pass

    def stop_sound(self, filename):
        pass

    def set_sound_volume(self, volume):
        pass


@pytest.fixture(autouse=True)
def reset_instances():
    Screen.set_instance(None)
    Input.set_instance(None)
    Audio.set_instance(None)
    yield
    Screen.set_instance(None)
    Input.set_instance(None)
    Audio.set_instance(None)


def test_key_numbering_starts_at_zero_and_is_consecutive():
    assert Key(0) is Key.A
    assert [k.value for k in Key] == list(range(len(Key)))
    assert Key(Key.Z + 1) is Key.NUM0
    assert Key(len(Key) - 1) is Key.RIGHT_SUPER


def test_mouse_button_values():
    assert MouseButton(1) is MouseButton.LEFT
    assert MouseButton(2) is MouseButton.MIDDLE
    assert MouseButton(3) is MouseButton.RIGHT
    assert MouseButton(5) is MouseButton.X2


@pytest.mark.parametrize("service", [Screen, Input, Audio])
def test_abstract_services_cannot_be_instantiated(service):
    with pytest.raises(TypeError):
        service()


@pytest.mark.parametrize("service", [Screen, Input, Audio])
def test_instances_default_to_none(service):
    assert service.get_instance() is None


def test_set_instance_registers_each_service_separately():
    screen = StubScreen()
    Screen.set_instance(screen)
    assert Screen.get_instance() is screen
    assert Input.get_instance() is None
    assert Audio.get_instance() is None

    inp = StubInput()
    audio = StubAudio()
    Input.set_instance(inp)
    Audio.set_instance(audio)
    assert Input.get_instance() is inp
    assert Audio.get_instance() is audio
    assert Screen.get_instance() is screen


def test_registered_services_are_usable_through_registry():
    inp = StubInput()
    inp.keys.add(Key.W)
    Input.set_instance(inp)
    assert Input.get_instance().is_key_pressed(Key.W)
    assert not Input.get_instance().is_key_pressed(Key.S)


def test_time_defaults():
    t = Time()
    assert t.delta_time == 0.0
    assert t.total_time == 0.0
    assert t.frame_count == 0
    assert t.fps == 60.0
    assert t.target_fps == 60.0
    assert t.fixed_delta_time == pytest.approx(1.0 / 60.0)


def test_time_update_accumulates():
    t = Time()
    steps = [0.1, 0.2, 0.3]
    for dt in steps:
        t.update(dt)
    assert t.frame_count == len(steps)
    assert t.delta_time == steps[-1]
    assert t.total_time == pytest.approx(sum(steps))


def test_fps_only_changes_after_half_second():
    t = Time()
    t.update(0.25)
    assert t.fps == 60.0
    t.update(0.25)
    assert t.fps == pytest.approx(2 / 0.5)
    measured = t.fps
    t.update(0.25)
    assert t.fps == measured


def test_time_get_instance_is_shared():
    first = Time.get_instance()
    assert Time.get_instance() is first
    frames = first.frame_count
    first.update(0.01)
    assert Time.get_instance().frame_count == frames + 1
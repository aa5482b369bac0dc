'''
Terminal keypad tests, without running the application
'''

from types import SimpleNamespace

from prompt_toolkit.application import create_app_session
from prompt_toolkit.input import DummyInput
from prompt_toolkit.keys import Keys
from prompt_toolkit.mouse_events import MouseEventType
from prompt_toolkit.output import DummyOutput

from rpncalc.app import ROWS, build_application, key_bindings, keypad_fragments
from rpncalc.engine import Engine


def press_key(bindings, *keys):
    binding, = bindings.get_bindings_for_keys(keys)
    binding.handler(None)


def test_rows_only_use_commands():
    for row in ROWS:
        for _, command, _ in row:
            assert command in Engine.COMMANDS


def test_shortcuts(keypad):
    bindings = key_bindings(keypad)
    press_key(bindings, '1')
    press_key(bindings, '2')
    press_key(bindings, Keys.ControlM)
    press_key(bindings, '3')
    press_key(bindings, '-')
    assert keypad.display == '9'
    press_key(bindings, Keys.Escape)
    assert keypad.display == '0'


def test_delete_clears_entry(keypad):
    bindings = key_bindings(keypad)
    press_key(bindings, '5')
    press_key(bindings, Keys.ControlJ)
    press_key(bindings, '7')
    press_key(bindings, Keys.Delete)
    assert keypad.display == '5\n0'


def test_quit_binding(keypad):
    bindings = key_bindings(keypad)
    exited = []
    event = SimpleNamespace(app=SimpleNamespace(exit=lambda: exited.append(1)))
    binding, = bindings.get_bindings_for_keys((Keys.ControlC,))
    binding.handler(event)
    assert exited == [1]


def test_click(keypad):
    handlers = {text.strip(): fragment[2]
                for fragment in keypad_fragments(keypad)
                for text in [fragment[1]]
                if len(fragment) == 3}
    up = SimpleNamespace(event_type=MouseEventType.MOUSE_UP)
    down = SimpleNamespace(event_type=MouseEventType.MOUSE_DOWN)
    assert handlers['9'](down) is NotImplemented
    assert keypad.display == '0'
    handlers['9'](up)
    handlers['Enter'](up)
    handlers['3'](up)
    handlers['/'](up)
    assert keypad.display == '3'


def test_build_application(keypad):
    with create_app_session(input=DummyInput(), output=DummyOutput()):
        app = build_application(keypad)
        assert app.full_screen

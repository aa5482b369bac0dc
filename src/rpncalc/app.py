'''
Full screen terminal keypad, built on prompt_toolkit.
'''

import logging

from prompt_toolkit.application import Application
from prompt_toolkit.data_structures import Point
from prompt_toolkit.key_binding import KeyBindings
from prompt_toolkit.layout import HSplit, Layout, Window, WindowAlign
from prompt_toolkit.layout.controls import FormattedTextControl
from prompt_toolkit.mouse_events import MouseEventType
from prompt_toolkit.styles import Style
from prompt_toolkit.widgets import Frame

from .shell import StatusHandler


# Same arrangement as the desktop window: label, command, args.
ROWS = [
    [('<-', 'backspace', ()),
     ('C', 'clear_current', ()),
     ('AC', 'clear_all', ())],
    [('7', 'digit', (7,)),
     ('8', 'digit', (8,)),
     ('9', 'digit', (9,)),
     ('/', 'divide', ())],
    [('4', 'digit', (4,)),
     ('5', 'digit', (5,)),
     ('6', 'digit', (6,)),
     ('*', 'multiply', ())],
    [('1', 'digit', (1,)),
     ('2', 'digit', (2,)),
     ('3', 'digit', (3,)),
     ('-', 'subtract', ())],
    [('0', 'digit', (0,)),
     ('.', 'decimal_point', ()),
     ('Enter', 'enter', ()),
     ('+', 'add', ())],
]

# Keyboard shortcuts, as prompt_toolkit key names.
SHORTCUTS = {
    **{str(n): ('digit', (n,)) for n in range(10)},
    '.': ('decimal_point', ()),
    '+': ('add', ()),
    '-': ('subtract', ()),
    '*': ('multiply', ()),
    '/': ('divide', ()),
    'enter': ('enter', ()),
    'c-j': ('enter', ()),
    'backspace': ('backspace', ()),
    'delete': ('clear_current', ()),
    'escape': ('clear_all', ()),
}
QUIT = ('c-c', 'c-d', 'q')

KEY_WIDTH = 7

# Logger every module in the package logs under.
PACKAGE_LOGGER = 'rpncalc'

STYLE = Style.from_dict({
    'display': 'bold',
    'key': 'reverse',
    'key.command': 'reverse ansiblue',
    'status': 'ansiyellow',
})


def _press_handler(keypad, command, args):
    def handler(event):
        keypad.press(command, *args)
    return handler


def _click_handler(keypad, command, args):
    def handler(mouse_event):
        if mouse_event.event_type != MouseEventType.MOUSE_UP:
            return NotImplemented
        keypad.press(command, *args)
    return handler


def key_bindings(keypad):
    '''
    Bind keyboard shortcuts to keypad commands.
    '''
    bindings = KeyBindings()
    for key, (command, args) in SHORTCUTS.items():
        # Escape would otherwise wait to see if it starts a sequence.
        bindings.add(key, eager=key == 'escape')(
            _press_handler(keypad, command, args))

    for key in QUIT:
        @bindings.add(key)
        def _(event):
            event.app.exit()

    return bindings


def keypad_fragments(keypad):
    '''
    Formatted text for the clickable keypad.
    '''
    fragments = []
    for row in ROWS:
        for label, command, args in row:
            style = 'class:key' if command == 'digit' else 'class:key.command'
            fragments.append((style,
                              label.center(KEY_WIDTH),
                              _click_handler(keypad, command, args)))
            fragments.append(('', ' '))
        fragments.append(('', '\n'))
    return fragments


def build_application(keypad):
    '''
    Create the full screen keypad application around keypad.
    '''
    def cursor():
        # Bottom line, so the current value stays in view.
        return Point(x=0, y=keypad.display.count('\n'))

    display = Window(FormattedTextControl(lambda: keypad.display,
                                          get_cursor_position=cursor),
                     align=WindowAlign.RIGHT,
                     style='class:display')
    pad = Window(FormattedTextControl(keypad_fragments(keypad)),
                 height=len(ROWS),
                 dont_extend_height=True)
    status = Window(FormattedTextControl(lambda: keypad.status),
                    height=1,
                    style='class:status')
    layout = Layout(HSplit([Frame(display, title='rpncalc'),
                            pad,
                            status]))
    return Application(layout=layout,
                       key_bindings=key_bindings(keypad),
                       style=STYLE,
                       full_screen=True,
                       mouse_support=True)


def run_application(keypad):
    '''
    Run the keypad until the user quits.

    The package's log records go to the status line, and nowhere else,
    while the screen is taken over.
    '''
    package_log = logging.getLogger(PACKAGE_LOGGER)
    handlers = package_log.handlers[:]
    propagate = package_log.propagate
    status_handler = StatusHandler(keypad)
    status_handler.setFormatter(logging.Formatter('%(message)s'))
    for handler in handlers:
        package_log.removeHandler(handler)
    package_log.addHandler(status_handler)
    package_log.propagate = False
    try:
        build_application(keypad).run()
    finally:
        package_log.removeHandler(status_handler)
        for handler in handlers:
            package_log.addHandler(handler)
        package_log.propagate = propagate

import logging
import sys

from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.prompt import Prompt
from rich.theme import Theme

from .config import load_config, toggle_debug
from .errors import FictionEngineError
from .interpreter import Interpreter
from .loader import load_sample_world, load_world
from .persistence import load_session, save_session
from .session import Session

logger = logging.getLogger(__name__)

custom_theme = Theme({
    "info": "bold #b0d8e3",       # Pale Cyan
    "text": "default",
    "dim": "dim",
    "warning": "bold #ffafaf",    # Soft red
    "success": "bold #a3be8c",    # Soft green
})

QUIT_COMMANDS = ("quit", "exit")


def setup_logging(debug=False):
    level = logging.DEBUG if debug else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(name)s: %(message)s",
        handlers=[RichHandler(show_time=False, markup=False)],
        force=True,
    )


class TerminalGame:
    """
    The player-facing loop. Meta commands (save/load/restart/debug/quit)
    are handled here; everything else goes to the Interpreter.
    """

    def __init__(self, world, config, console=None, config_file=None):
        self.world = world
        self.config = config
        self.config_file = config_file
        self.console = console or Console(theme=custom_theme)
        self.interpreter = Interpreter(world)

    def print_lines(self, lines):
        for line in lines:
            self.console.print(line, markup=False, highlight=False)

    def show_opening(self):
        game_map = self.world.maps[self.interpreter.session.current_map]
        self.console.print(Panel(f"[bold blue]{game_map.name}[/bold blue]", title="GAME STARTED", border_style="info"))
        lines = self.interpreter.opening()
        if not self.config.get('show_introduction', True):
            lines = lines[1:]
        self.print_lines(lines)
        self.console.print("[dim]Type 'quit' to leave, 'save'/'load' to keep your progress.[/dim]\n")

    def handle_meta(self, command):
        """Returns None if `command` isn't a meta command, False to stop the loop, True otherwise."""
        verb = command.strip().lower()
        if verb in QUIT_COMMANDS:
            self.console.print("\nGoodbye.")
            return False

        if verb == "save":
            path = self.config['save_file']
            try:
                save_session(self.interpreter.session, path)
            except OSError as e:
                self.console.print(Panel(f"[warning]Could not save:[/] {e}", border_style="warning"))
                return True
            self.console.print(f"[success]Saved to {path}.[/success]")
            return True

        if verb == "load":
            path = self.config['save_file']
            try:
                session = load_session(path)
            except FileNotFoundError:
                self.console.print("[dim]No save file found.[/dim]")
                return True
            except FictionEngineError as e:
                self.console.print(Panel(f"[warning]Could not load:[/] {e}", border_style="warning"))
                return True
            self.interpreter.load_state(session.to_state())
            self.console.print(f"[success]Loaded from {path}.[/success]")
            self.print_lines(self.interpreter.handle_command("look"))
            return True

        if verb == "restart":
            self.interpreter.load_state(Session.new(self.world).to_state())
            self.show_opening()
            return True

        if verb == "debug":
            self.config['debug_mode'] = not self.config.get('debug_mode', False)
            toggle_debug(self.config['debug_mode'], self.config_file)
            setup_logging(self.config['debug_mode'])
            state = "ON" if self.config['debug_mode'] else "OFF"
            self.console.print(Panel(f"[info]DEBUG MODE:[/] [bold]{state}[/bold]", border_style="info"))
            return True

        return None

    def run(self, read_command=None):
        read_command = read_command or (lambda: Prompt.ask("[info]>[/info]", console=self.console))
        self.show_opening()
        while True:
            try:
                command = read_command()
            except (EOFError, KeyboardInterrupt):
                self.console.print("\nExiting.")
                break
            if not command.strip():
                continue

            meta = self.handle_meta(command)
            if meta is False:
                break
            if meta:
                continue
            self.print_lines(self.interpreter.handle_command(command))


def open_world(config):
    path = config.get('world_file')
    if path:
        return load_world(path)
    return load_sample_world()


def main(argv=None):
    argv = sys.argv[1:] if argv is None else argv
    console = Console(theme=custom_theme)
    config_file = argv[0] if argv else None

    try:
        config = load_config(config_file)
    except FictionEngineError as e:
        console.print(Panel(f"[warning]CONFIG ERROR:[/]\n{e}", border_style="warning"))
        return 1
    setup_logging(config.get('debug_mode', False))

    try:
        world = open_world(config)
    except FileNotFoundError as e:
        console.print(Panel(f"[warning]ERROR: World file not found.[/] {e}", border_style="warning"))
        return 1
    except FictionEngineError as e:
        console.print(Panel(f"[warning]WORLD STRUCTURE ERROR:[/]\nCheck your world file.\nDetails: {e}", border_style="warning"))
        return 1

    if not world.maps or not world.maps[0].locations:
        console.print(Panel("[warning]This world has no locations to play.[/]", border_style="warning"))
        return 1

    TerminalGame(world, config, console=console, config_file=config_file).run()
    return 0

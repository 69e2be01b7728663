"""Console interface and command entry point for the clinic simulation."""

from __future__ import annotations

import argparse
import sys
from typing import Optional, Sequence, TextIO

from clinicsim.scheduler import Scheduler

DEFAULT_INPUT_FILE = "input.txt"


class UI:
    """Reads the input file name and prints the state of a scheduler."""

    def __init__(
        self,
        is_interactive: bool = True,
        stdin: Optional[TextIO] = None,
        stdout: Optional[TextIO] = None,
    ) -> None:
        self.is_interactive = is_interactive
        self._stdin = stdin
        self._stdout = stdout

    @property
    def _in(self) -> TextIO:
        return self._stdin if self._stdin is not None else sys.stdin

    @property
    def _out(self) -> TextIO:
        return self._stdout if self._stdout is not None else sys.stdout

    def ask_input_file_name(self) -> str:
        """Prompt for the input file name; an empty answer means the default."""
        self._out.write(f"Enter input file name (default: {DEFAULT_INPUT_FILE}): ")
        self._out.flush()
        words = self._in.readline().split()
        return words[0] if words else DEFAULT_INPUT_FILE

    def print_all_information(self, scheduler: Scheduler, ts: int) -> None:
        """Print every list of the scheduler for time step `ts`."""
        s = scheduler
        parts = [
            f"Current Timestep: {ts}\n",
            "=================  ALL List  =================\n",
            f"{len(s.idle)} patients remaining: \n",
            s.idle.render(True) + "\n",
            "=================  Waiting Lists  =================\n",
            f"{len(s.wait_e)} Electro Therapy Patients: \n",
            s.wait_e.render(True) + "\n",
            f"{len(s.wait_u)} Ultra Therapy Patients: \n",
            s.wait_u.render(True) + "\n",
            f"{len(s.wait_x)} X Therapy Patients: \n",
            s.wait_x.render(True) + "\n",
            "\n",
            "=================  Early List  =================\n",
            f"{len(s.early)} patients: \n",
            s.early.render(True) + "\n",
            "\n",
            "=================  Late List  =================\n",
            f"{len(s.late)} patients: \n",
            s.late.render(True) + "\n",
            "\n",
            "=================  Avail E-Devices  =================\n",
            f"{len(s.e_devices)} Electro Devices: {s.e_devices.render()}\n",
            "\n",
            "=================  Avail U-Devices  =================\n",
            f"{len(s.u_devices)} Ultra Devices: {s.u_devices.render()}\n",
            "\n",
            "=================  Avail X-Rooms  =================\n",
            f"{len(s.x_rooms)} Rooms: {s.x_rooms.render()}\n",
            "\n",
            "=================  Serving List  =================\n",
            f"{len(s.serving)}\n",
            s.serving.render(True) + "\n",
            "=================  Finish List  =================\n",
            f"{len(s.finish)}\n",
            s.finish.render(True) + "\n",
        ]
        self._out.write("".join(parts))
        self._out.flush()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Load an input file and run the simulation step by step."""
    parser = argparse.ArgumentParser(description="Run the clinic simulation.")
    parser.add_argument("input_file", nargs="?", help="input file; asked for when omitted")
    args = parser.parse_args(argv)

    ui = UI()
    name = args.input_file if args.input_file else ui.ask_input_file_name()
    scheduler = Scheduler()
    try:
        scheduler.load_input_file(name)
    except (OSError, ValueError) as error:
        print(f"error: {error}", file=sys.stderr)
        return 1
    scheduler.run(ui)
    return 0


if __name__ == "__main__":
    sys.exit(main())
# app.py

import argparse
import sys

from rich.console import Console
from rich.prompt import Prompt, IntPrompt, Confirm

from config.config_loader import DEFAULT_CONFIG_PATH, load_config, save_config
from logger.logger import JSONLogger
from simulator.engine import TuringRun, make_console
from simulator.samples import SAMPLE_MACHINES, SAMPLE_TAPES, get_sample
from tools.machine_inspect import list_machines, pretty_print_machine

console = Console()

# === Utilities ===
def load_runtime_config(path=DEFAULT_CONFIG_PATH):
    try:
        return load_config(path)
    except FileNotFoundError:
        console.print(f"[red]Error: {path} not found![/red]")
        sys.exit(1)
    except (ValueError, TypeError) as e:
        console.print(f"[red]Error: invalid configuration in {path}: {e}[/red]")
        sys.exit(1)

def save_runtime_config(config, path=DEFAULT_CONFIG_PATH):
    save_config(config, path)
    console.print("[green]Configuration updated successfully.[/green]")

def report_consistency(machine):
    issues = machine.consistency_report()
    if not issues:
        console.print(f"[green]Machine '{machine.name}' is consistent with its declarations.[/green]")
        return issues
    console.print(f"[yellow]Machine '{machine.name}' has {len(issues)} consistency warning(s):[/yellow]")
    for issue in issues:
        console.print(f"  - {issue}", markup=False)
    return issues

def run_machine(machine_name, tape=None, head_position=0, max_steps=None, validate=False,
                log_runs=False, output_directory="logs/", log_file_prefix="tape_machine_", frame_console=None):
    """Run a built-in machine to completion and optionally append the result to the run log."""
    machine = get_sample(machine_name)
    if tape is None:
        tape = SAMPLE_TAPES.get(machine_name, "")

    if validate:
        report_consistency(machine)

    run = TuringRun(machine, list(tape), head_position, machine.start_state, console=frame_console or make_console())
    summary = run.run(max_steps=max_steps)

    if log_runs:
        logger = JSONLogger(output_directory, log_file_prefix)
        logger.log_run(summary, machine, tape)
    return summary

def run_from_config(config, frame_console=None):
    return run_machine(
        config["machine"],
        tape=config["initial_tape"],
        head_position=config["head_position"],
        max_steps=config["max_steps"],
        validate=config["validate_machine"],
        log_runs=config["log_runs"],
        output_directory=config["output_directory"],
        log_file_prefix=config["log_file_prefix"],
        frame_console=frame_console,
    )

def show_summary(summary):
    console.print(
        f"[bold]{summary.machine}[/bold]: {summary.steps} step(s), "
        f"final state [cyan]{summary.final_state}[/cyan], head {summary.head_position}, "
        f"halted by [magenta]{summary.halt_reason}[/magenta]"
    )

def show_main_menu():
    console.print("\n[bold cyan]Tape Machine Simulator[/bold cyan]")
    console.print("[1] Run a Machine")
    console.print("[2] Inspect a Transition Table")
    console.print("[3] List Machines")
    console.print("[4] Edit Config")
    console.print("[5] Exit")

def prompt_machine(config):
    return Prompt.ask("Machine", choices=sorted(SAMPLE_MACHINES), default=config["machine"])

def handle_run(config):
    console.print("\n[bold]Run a Machine[/bold]")

    machine_name = prompt_machine(config)
    default_tape = config["initial_tape"] if config["initial_tape"] is not None else SAMPLE_TAPES.get(machine_name, "")
    tape = Prompt.ask("Initial tape", default=default_tape)
    head_position = IntPrompt.ask("Head position", default=config["head_position"])

    run_config = dict(config, machine=machine_name, initial_tape=tape, head_position=head_position)
    summary = run_from_config(run_config)
    show_summary(summary)

def handle_inspect(config):
    console.print("\n[bold]Inspect a Transition Table[/bold]")
    pretty_print_machine(get_sample(prompt_machine(config)))

def handle_edit_config(config, config_path):
    console.print("\n[bold]Edit Configuration[/bold]")

    machine_name = prompt_machine(config)
    head_position = IntPrompt.ask("Head position", default=config["head_position"])
    max_steps = IntPrompt.ask("Max steps (0 for unbounded)", default=config["max_steps"] or 0)
    validate_machine = Confirm.ask("Validate machines before running?", default=config["validate_machine"])
    log_runs = Confirm.ask("Log runs?", default=config["log_runs"])

    config.update({
        "machine": machine_name,
        "head_position": head_position,
        "max_steps": max_steps if max_steps > 0 else None,
        "validate_machine": validate_machine,
        "log_runs": log_runs
    })

    save_runtime_config(config, config_path)

def interactive_main(config_path=DEFAULT_CONFIG_PATH):
    config = load_runtime_config(config_path)

    while True:
        show_main_menu()
        choice = Prompt.ask("\nChoose an option", choices=["1", "2", "3", "4", "5"], default="5")

        if choice == "1":
            handle_run(config)
        elif choice == "2":
            handle_inspect(config)
        elif choice == "3":
            list_machines(console)
        elif choice == "4":
            handle_edit_config(config, config_path)
            config = load_runtime_config(config_path)
        elif choice == "5":
            console.print("[bold green]Goodbye![/bold green]")
            break

# === CLI Mode for Automation ===
def cli_main(args, frame_console=None):
    config = load_runtime_config(args.config)

    if args.list:
        list_machines(console)
        return None

    overrides = {
        "machine": args.machine,
        "initial_tape": args.tape,
        "head_position": args.head,
        "max_steps": args.max_steps,
    }
    config.update({key: value for key, value in overrides.items() if value is not None})
    if args.validate:
        config["validate_machine"] = True
    if args.no_log:
        config["log_runs"] = False

    try:
        if args.inspect:
            pretty_print_machine(get_sample(config["machine"]), console)
            return None
        summary = run_from_config(config, frame_console=frame_console)
    except ValueError as e:
        console.print(f"[red]Error: {e}[/red]")
        sys.exit(1)

    show_summary(summary)
    return summary

def build_parser():
    parser = argparse.ArgumentParser(description="Deterministic single-tape Turing machine simulator")
    parser.add_argument("--machine", help="Built-in machine to run (see --list)")
    parser.add_argument("--tape", help="Initial tape, one symbol per character")
    parser.add_argument("--head", type=int, help="Initial head position")
    parser.add_argument("--max-steps", dest="max_steps", type=int, help="Stop after this many steps (default: unbounded)")
    parser.add_argument("--validate", action="store_true", help="Report declaration inconsistencies before running")
    parser.add_argument("--inspect", action="store_true", help="Print the transition table instead of running")
    parser.add_argument("--list", action="store_true", help="List built-in machines")
    parser.add_argument("--no-log", dest="no_log", action="store_true", help="Do not append the run to the JSON-lines log")
    parser.add_argument("--config", default=DEFAULT_CONFIG_PATH, help="Runtime config file")
    return parser

def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.max_steps is not None and args.max_steps <= 0:
        parser.error("--max-steps must be a positive integer")

    cli_requested = any([args.machine, args.tape is not None, args.head is not None, args.max_steps,
                         args.validate, args.inspect, args.list, args.no_log])
    if cli_requested:
        cli_main(args)
    else:
        interactive_main(args.config)

if __name__ == "__main__":
    main()

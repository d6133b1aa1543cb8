"""Input adapters: line parsers, interactive console, JSON scenarios."""

from autodrive_sim.io.console import ConsoleSession
from autodrive_sim.io.parsing import parse_car_details, parse_commands, parse_field_size
from autodrive_sim.io.scenario import load_scenario, scenario_from_dict, scenario_to_dict

__all__ = [
    "ConsoleSession",
    "load_scenario",
    "parse_car_details",
    "parse_commands",
    "parse_field_size",
    "scenario_from_dict",
    "scenario_to_dict",
]

"""Command-line interface for hsscaffold."""

from __future__ import annotations

import logging as logging

from hsscaffold import ConfigError as ConfigError
from hsscaffold import ScaffoldError as ScaffoldError
from hsscaffold import default_config as default_config
from hsscaffold import echo_messages as echo_messages
from hsscaffold import load_config as load_config
from hsscaffold import scaffold_batch as scaffold_batch
from hsscaffold import scaffold_project as scaffold_project
from hsscaffold import write_config as write_config
from hsscaffold.cli.app import main as main
from hsscaffold.cli.commands import echo as echo_command
from hsscaffold.cli.commands import file as file_command
from hsscaffold.cli.commands import init as init_command
from hsscaffold.cli.commands import new as new_command
from hsscaffold.cli.common import format_scaffold_summary as format_scaffold_summary
from hsscaffold.cli.parser import build_parser as build_parser
from hsscaffold.cli.prompt import questionary_confirm as questionary_confirm

_run_new = new_command.run_new
_run_file = file_command.run_file
_run_init = init_command.run_init
_run_echo = echo_command.run_echo

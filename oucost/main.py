#!/usr/bin/env python3

import click
import logging
from oucost.reporting.commands import cost as cost_commands

@click.group()
@click.option("--log-level", '-l', default="INFO", type=click.Choice(["INFO", "ERROR", "DEBUG"]), help="How much information to show in logging. Default is INFO")
@click.pass_context
def cli(ctx=None, log_level=None):
    logging.getLogger().setLevel(log_level)
    ctx.obj = {'log_level': log_level}

cli.add_command(cost_commands)

def main():
    cli()

if __name__ == "__main__":
    main()

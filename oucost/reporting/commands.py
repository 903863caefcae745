import click
from botocore.exceptions import BotoCoreError, ClientError
from datetime import datetime
from oucost.client.aws_client import AWS_Client
from oucost.libs import helpers, exceptions, time_window
import logging
import sys
import tabulate

helpers.set_logger()

# This is the Click() group that's imported into the CLI at the top level
@click.group()
@click.option("--ou-id", required=True, envvar="OUCOST_OU_ID", help="ID of the organizational unit (or root) to report the cost of")
@click.option("--region", default="us-east-1", help="Region to talk to Organizations and Cost Explorer in. Default is us-east-1")
@click.option("--role-arn", required=False, help="Role ARN which contains the necessary assume permissions. Omit to use --profile or the default credentials")
@click.option("--profile", required=False, envvar="AWS_PROFILE", help="Named AWS profile with access to the organization's management account")
@click.option("--metric", default="NetUnblendedCost", help="Cost Explorer metric to add up. Default is NetUnblendedCost")
@click.option("--valid-for", type=int, default=3600, help="Seconds the credentials from assuming --role-arn stay valid for. Must cover the whole run. Default is 3600")
@click.pass_context
def cost(ctx, ou_id, region, role_arn, profile, metric, valid_for):
    """
    Cost subcommand. Only collects the OU and AWS session options into ctx for the
    commands under it
    """

    ctx.obj = {
        'ou_id': ou_id,
        'region': region,
        'role_arn': role_arn,
        'profile': profile,
        'metric': metric,
        'valid_for': valid_for,
        'log_level': (ctx.obj or {}).get('log_level')
    }

    pass

@cost.command()
@click.pass_context
@click.option("--recursive", "-r", is_flag=True, help="Add up the accounts of every OU under --ou-id too, not just the ones directly in it")
@click.option("--time", "time_mode", default=time_window.ALL, help="MTD (month to date), YTD (year to date) or all (the last year, from the 1st of the month). Default is all")
def ou(ctx, recursive, time_mode):
    """
    Report the cost of an organizational unit. Without --recursive only the accounts directly
    in the OU are counted
    """

    start_time = datetime.now()

    ou_id = ctx.obj.get('ou_id')
    region = ctx.obj.get('region')
    role_arn = ctx.obj.get('role_arn')
    profile = ctx.obj.get('profile')
    metric = ctx.obj.get('metric')
    valid_for = ctx.obj.get('valid_for')

    from .ou_cost import ou_cost
    from oucost.libs import costexplorer, organizations

    aws_client = AWS_Client()

    try:
        reporter = ou_cost.OUCost(
            organizations=organizations.Organizations(
                aws_client.create_client('organizations', region, role_arn=role_arn, profile=profile, valid_for=valid_for)
            ),
            costexplorer=costexplorer.CostExplorer(
                aws_client.create_client('ce', region, role_arn=role_arn, profile=profile, valid_for=valid_for),
                metric=metric
            ),
            time_mode=time_mode
        )
        total = reporter.run(ou_id, recursive=recursive)
    except (ClientError, BotoCoreError, exceptions.OUCostError) as e:
        logging.error(e)
        sys.exit(1)

    results = [[
        ou_id,
        "recursive" if recursive else "flat",
        str(reporter.window),
        helpers.format_amount(total)
    ]]

    click.echo(tabulate.tabulate(results, headers=["OU", "Mode", "Window", "Total"], tablefmt='psql', disable_numparse=True))
    click.echo("Time of program execution: {}".format(helpers.elapsed_since(start_time)))

"""
Command-line interface for the Currency Catalog.

Provides commands for:
- Looking up currencies by ISO 4217 code
- Formatting amounts with a currency's symbol and precision
- Listing currencies and the countries that use them
"""

import click
import json
import sys
from decimal import Decimal, InvalidOperation

from currency_catalog import __version__
from currency_catalog.core.catalog import CurrencyCatalog, load_catalog
from currency_catalog.core.config import CatalogConfig
from currency_catalog.core.constants import VALID_LOG_LEVELS, VALID_SYMBOL_POSITIONS
from currency_catalog.core.exceptions import ConfigError, DataSourceError, ParameterError
from currency_catalog.core.logging_config import setup_logging, get_logger
from currency_catalog.core.pretty_output import PrettyOutput as po

logger = get_logger(__name__)


@click.group()
@click.version_option(version=__version__)
@click.option('--config', '-c', 'config_file', type=click.Path(exists=True, dir_okay=False),
              help='YAML configuration file (data sources, formatting defaults, logging)')
@click.option('--log-level', type=click.Choice(VALID_LOG_LEVELS, case_sensitive=False),
              default=None, help='Logging level (overrides config, default: WARNING)')
@click.option('--log-file', type=click.Path(), help='Optional log file path')
@click.pass_context
def cli(ctx, config_file, log_level, log_file):
    """
    Currency Catalog - ISO 4217 currency lookup and amount formatting.

    Looks up currency names, symbols and decimal precision, formats amounts,
    and cross-references currencies with the countries that use them.
    """
    ctx.ensure_object(dict)

    try:
        config = CatalogConfig.from_yaml(config_file) if config_file else CatalogConfig()
    except ConfigError as e:
        po.error(f"Configuration error: {e.message}")
        sys.exit(1)

    setup_logging(level=log_level or config.log_level, log_file=log_file or config.log_file)
    logger.debug(f"Using configuration: {config!r}")
    ctx.obj['config'] = config


def _load_catalog(ctx) -> CurrencyCatalog:
    """Build the catalog for a command, exiting with status 1 on data errors."""
    try:
        return load_catalog(ctx.obj['config'])
    except DataSourceError as e:
        po.error(f"Failed to load reference data: {e.message}")
        sys.exit(1)


def _parse_amount(ctx, param, value):
    """click callback converting the AMOUNT argument to a Decimal."""
    try:
        return Decimal(value.replace(',', ''))
    except InvalidOperation:
        raise click.BadParameter(f"'{value}' is not a number")


@cli.command()
@click.argument('code')
@click.option('--json', 'as_json', is_flag=True, help='Print the record as JSON')
@click.pass_context
def show(ctx, code, as_json):
    """
    Show details for a currency.

    CODE: ISO 4217 currency code (case-insensitive)

    Examples:

    \b
    currency-catalog show USD
    currency-catalog show jpy --json
    """
    catalog = _load_catalog(ctx)
    currency = catalog.get(code)
    if currency is None:
        po.error(f"Unknown currency code: {code}")
        sys.exit(1)

    if as_json:
        click.echo(json.dumps(currency.to_dict(), ensure_ascii=False, indent=2))
        return

    po.section(f"{currency.code} - {currency.name}")
    po.key_value("Plural", currency.name_plural, indent=2)
    po.key_value("Symbol", currency.symbol, indent=2)
    po.key_value("Native symbol", currency.symbol_native, indent=2)
    po.key_value("Decimal digits", currency.decimal_digits, indent=2)
    po.key_value("Example", catalog.format(1234.5, currency.code), indent=2)
    po.key_value("Countries", len(catalog.countries_for_currency(currency.code)), indent=2)


@cli.command('format', context_settings={'ignore_unknown_options': True})
@click.argument('amount', callback=_parse_amount)
@click.argument('code')
@click.option('--native/--international', default=None,
              help='Use the native symbol instead of the international one')
@click.option('--symbol-position', '-p', type=click.Choice(VALID_SYMBOL_POSITIONS, case_sensitive=False),
              default=None, help='Place the symbol before or after the number')
@click.pass_context
def format_command(ctx, amount, code, native, symbol_position):
    """
    Format an amount in a currency.

    AMOUNT: Number to format (negative values allowed)
    CODE: ISO 4217 currency code (case-insensitive)

    Examples:

    \b
    currency-catalog format 1234.56 USD        # $1,234.56
    currency-catalog format 1234.56 EUR -p after  # 1,234.56€
    currency-catalog format 1234.56 RUB --native  # ₽1,234.56
    """
    catalog = _load_catalog(ctx)
    try:
        result = catalog.format(amount, code, native=native, symbol_position=symbol_position)
    except ParameterError as e:
        po.error(e.message)
        sys.exit(1)

    if result is None:
        po.error(f"Unknown currency code: {code}")
        sys.exit(1)
    click.echo(result)


@cli.command('list')
@click.option('--json', 'as_json', is_flag=True, help='Print all records as a JSON array')
@click.pass_context
def list_currencies(ctx, as_json):
    """
    List all currencies, sorted by code.

    Examples:

    \b
    currency-catalog list
    currency-catalog list --json
    """
    catalog = _load_catalog(ctx)
    currencies = catalog.all()

    if as_json:
        click.echo(json.dumps([c.to_dict() for c in currencies], ensure_ascii=False, indent=2))
        return

    po.section(f"Currencies ({catalog.count()})")
    rows = [(c.code, c.name, c.symbol, c.symbol_native, c.decimal_digits) for c in currencies]
    po.compact_table(["Code", "Name", "Symbol", "Native", "Digits"], rows)


@cli.command()
@click.argument('code')
@click.pass_context
def countries(ctx, code):
    """
    List the countries that use a currency, sorted by name.

    CODE: ISO 4217 currency code (case-insensitive)
    """
    catalog = _load_catalog(ctx)
    currency = catalog.get(code)
    if currency is None:
        po.error(f"Unknown currency code: {code}")
        sys.exit(1)

    users = catalog.countries_for_currency(code)
    po.section(f"Countries using {currency.code} ({currency.name}): {len(users)}")
    if not users:
        po.warning(f"No country in the catalog uses {currency.code}")
        return
    for country in users:
        po.item(f"{country.name} ({country.alpha2})", indent=2)


@cli.command('for-country')
@click.argument('country_code')
@click.pass_context
def for_country(ctx, country_code):
    """
    Show the currency used by a country.

    COUNTRY_CODE: ISO 3166-1 alpha-2 country code (case-insensitive)
    """
    catalog = _load_catalog(ctx)
    country = catalog.countries.get(country_code)
    if country is None:
        po.error(f"Unknown country code: {country_code}")
        sys.exit(1)

    currency = catalog.for_country(country_code)
    if currency is None:
        po.warning(f"{country.name} ({country.alpha2}) has no currency in the catalog")
        sys.exit(1)

    po.success(f"{country.name} ({country.alpha2}): {currency.code} - {currency.name} ({currency.symbol})")


@cli.command()
@click.pass_context
def info(ctx):
    """Show where the reference data comes from."""
    catalog = _load_catalog(ctx)
    source_info = catalog.get_data_source_info()

    po.section("Reference data sources")
    for name, source in source_info.get('sources', {}).items():
        click.echo(f"  {name}")
        for key, value in source.items():
            po.key_value(key, value, indent=4)
    po.blank_line()
    for name, count in source_info['record_counts'].items():
        po.key_value(f"{name} loaded", count, indent=2)
    po.key_value("strict", source_info.get('strict'), indent=2)


@cli.command()
def version():
    """Display version information."""
    click.echo(f"Currency Catalog v{__version__}")
    click.echo("ISO 4217 currency lookup and amount formatting")


def main():
    cli(obj={})


if __name__ == '__main__':
    main()

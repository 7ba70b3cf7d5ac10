from a11yctl.cli import cli

cli()

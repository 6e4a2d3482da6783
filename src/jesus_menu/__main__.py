from jesus_menu.cli import cli

cli()

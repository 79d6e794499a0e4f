from taskboard.main import cli

cli()

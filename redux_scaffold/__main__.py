from redux_scaffold.main import cli

cli()

from rolekeeper.cli.main import app

app()

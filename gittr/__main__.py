from gittr.cli import app

app()

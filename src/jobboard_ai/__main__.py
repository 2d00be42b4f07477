from jobboard_ai.cli import app

app()

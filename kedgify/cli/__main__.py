from kedgify.cli.cli import app

app(prog_name="kedgify")

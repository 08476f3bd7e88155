from figscribe.cli import app

app()

from slitwave.cli import app

app()

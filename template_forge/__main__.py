from template_forge.cli.main import app

app()

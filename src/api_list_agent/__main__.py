from api_list_agent.cli import app

app()

from api_list_agent.run import run_api_list

__all__ = ["run_api_list"]

from .openai_chat_client import OpenAIChatClient

__all__ = ["OpenAIChatClient"]

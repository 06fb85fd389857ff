"""
gpt5-gateway: HTTP gateway that wraps a prompt in guardrail and context text
and relays an OpenAI completion.
"""
__version__ = "1.0.0"

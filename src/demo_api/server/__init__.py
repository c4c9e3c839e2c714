"""ASGI request pipeline, error mapping and the uvicorn runner."""

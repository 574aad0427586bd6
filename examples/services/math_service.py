"""Example services documented by the server.

Run with:

    RPC_SERVICES="examples.services.math_service:MathService,examples.services.math_service:TaskService" \
        python -m service_docs.fastapi_server

then open http://localhost:4000/api/docs or http://localhost:4000/api/smd
"""

from service_docs import param, result


class MathService:
    name = "Math"

    @param("a", "int")
    @param("b", "int")
    @result("int", example=5)
    def sum(self, a, b):
        """Add two integers.

        Both operands must fit into a signed 64-bit integer.
        """
        return a + b

    @param("values.", "float")
    @param("values.", "float")
    @result("float", example=2.5)
    def mean(self, values):
        """Arithmetic mean of a list of numbers."""
        return sum(values) / len(values)


class TaskService:
    name = "Tasks"

    @param("filter", "object", optional=True)
    @param("filter.status", "string", optional=True, default="open")
    @param("filter.tags.", "string", optional=True)
    @param("limit", "int", optional=True, default=20)
    @result("array", name="items")
    @result("int", name="total", example=42)
    def search(self, filter=None, limit=20):
        """Search tasks by status and tags."""
        return {"items": [], "total": 0}

    @staticmethod
    def ping():
        return "pong"

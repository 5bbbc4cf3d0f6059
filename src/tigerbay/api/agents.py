"""Travel agent API actions."""

from ..models.agents import Agent, AgentStaff
from .base import ApiGroup


class AgentsApi(ApiGroup):
    def agents(self) -> list[Agent]:
        data = self._get("/sales/agents")
        return [Agent.model_validate(item) for item in data or []]

    def agent(self, id: int) -> Agent:
        path = f"/sales/agents/{id}"
        return self._parse(Agent, self._get(path), path)

    def agent_staff(self, id: int) -> list[AgentStaff]:
        """Get the staff members of an agent."""
        data = self._get(f"/sales/agents/{id}/staff")
        return [AgentStaff.model_validate(item) for item in data or []]

from policy.grid_policy import GridPolicy
from policy.heading_policy import Heading, HeadingNode, HeadingPolicy
from policy.policy_base import Policy

__all__ = ["Policy", "GridPolicy", "Heading", "HeadingNode", "HeadingPolicy"]

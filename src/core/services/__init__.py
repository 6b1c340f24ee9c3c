"""
Business services for DreamBody.

- profiles.py: user profile and quiz response data access
- plans.py: exercise and diet plan data access
- prompts.py / extraction.py: prompt rendering and JSON extraction
- bedrock.py: model and prompt-flow invocation
- plan_generation.py: profile + quiz -> generated plans
- plan_events.py: EventBridge publish and relay
"""

__all__: list[str] = []

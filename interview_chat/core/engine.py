from typing import Any, Dict, List

from langgraph.graph import END, StateGraph

from interview_chat.config.settings import settings
from interview_chat.core.feedback import FeedbackParseFailure, default_feedback, parse_feedback
from interview_chat.core.gateway import AIGatewayClient
from interview_chat.core.models import ChatAction, ChatState
from interview_chat.core.prompts import (
    END_INSTRUCTION,
    RESPOND_INSTRUCTION,
    START_INSTRUCTION,
    build_evaluation_prompt,
    build_interviewer_prompt,
)
from interview_chat.utils.logger import InterviewChatLogger

TRANSCRIPT_ROLES = ("user", "assistant", "system")


class InterviewChatEngine:
    """Stateless chat orchestrator.

    Every call is independent: the caller passes the whole transcript and gets
    back either the interviewer's next message or the final feedback.
    """

    def __init__(self, gateway: AIGatewayClient, logger: InterviewChatLogger | None = None):
        self.gateway = gateway
        self.logger = logger or gateway.stage_logger
        self.graph = self._build_graph()

    async def run(
        self,
        action: ChatAction | str,
        role_type: str,
        difficulty: str,
        messages: List[Dict[str, str]] | None = None,
        job_description: str | None = None,
    ) -> Dict[str, Any]:
        state: ChatState = {
            "role_type": role_type,
            "difficulty": difficulty,
            "job_description": job_description,
            "messages": list(messages or []),
            "action": ChatAction(action).value,
            "feedback": None,
        }
        result = await self.graph.ainvoke(state)

        if result["action"] == ChatAction.END.value:
            return result["feedback"]
        return {"message": result["content"]}

    def prompt_node(self, state: ChatState) -> ChatState:
        action = state["action"]
        transcript = [
            {"role": msg["role"], "content": msg["content"]}
            for msg in state.get("messages", [])
            if msg.get("role") in TRANSCRIPT_ROLES
        ]

        if action == ChatAction.START.value:
            system_prompt = build_interviewer_prompt(state["role_type"], state["difficulty"], state.get("job_description"))
            transcript = []
            instruction = START_INSTRUCTION
            max_tokens = settings.CHAT_MAX_TOKENS
        elif action == ChatAction.RESPOND.value:
            system_prompt = build_interviewer_prompt(state["role_type"], state["difficulty"], state.get("job_description"))
            instruction = RESPOND_INSTRUCTION
            max_tokens = settings.CHAT_MAX_TOKENS
        else:
            system_prompt = build_evaluation_prompt(state["role_type"])
            instruction = END_INSTRUCTION
            max_tokens = settings.FEEDBACK_MAX_TOKENS

        state["prompt_messages"] = [
            {"role": "system", "content": system_prompt},
            *transcript,
            {"role": "user", "content": instruction},
        ]
        state["max_tokens"] = max_tokens
        self.logger.log("Prompt", f"Prompt assembled for '{action}'", {
            "role_type": state["role_type"],
            "difficulty": state["difficulty"],
            "transcript_length": len(transcript),
        })
        return state

    async def complete_node(self, state: ChatState) -> ChatState:
        self.logger.log("Gateway", f"Requesting completion (max_tokens={state['max_tokens']})")
        state["content"] = await self.gateway.complete(state["prompt_messages"], state["max_tokens"])
        self.logger.log("Gateway", f"Completion received ({len(state['content'])} chars)")
        return state

    def evaluate_node(self, state: ChatState) -> ChatState:
        try:
            feedback = parse_feedback(state["content"])
            self.logger.log("Evaluator", f"Feedback parsed. Overall score: {feedback.overall_score}")
        except FeedbackParseFailure as e:
            self.logger.warning("Evaluator", f"{e}. Using default feedback", {"content": state["content"][:500]})
            feedback = default_feedback()

        state["feedback"] = feedback.model_dump(by_alias=True)
        return state

    def should_evaluate(self, state: ChatState) -> str:
        if state["action"] == ChatAction.END.value:
            return "evaluate"
        return "done"

    def _build_graph(self) -> StateGraph:
        workflow = StateGraph(ChatState)
        workflow.add_node("prompt", self.prompt_node)
        workflow.add_node("complete", self.complete_node)
        workflow.add_node("evaluate", self.evaluate_node)
        workflow.set_entry_point("prompt")

        workflow.add_edge("prompt", "complete")
        workflow.add_conditional_edges(
            "complete",
            self.should_evaluate,
            {"evaluate": "evaluate", "done": END}
        )

        workflow.add_edge("evaluate", END)
        return workflow.compile()

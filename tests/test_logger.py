import logging

from interview_chat.utils.logger import InterviewChatLogger


def test_events_are_recorded_and_capped():
    stage_logger = InterviewChatLogger(max_events=3)

    for i in range(5):
        stage_logger.log("Prompt", f"event {i}", {"i": i})

    assert [e["message"] for e in stage_logger.events] == ["event 2", "event 3", "event 4"]
    assert stage_logger.events[-1]["stage"] == "Prompt"
    assert stage_logger.events[-1]["data"] == {"i": 4}


def test_stage_prefix_is_written_to_log(caplog):
    stage_logger = InterviewChatLogger()

    with caplog.at_level(logging.WARNING, logger="interview_chat"):
        stage_logger.warning("Evaluator", "falling back")

    assert "[LOG :: EVALUATOR]" in caplog.text
    assert "falling back" in caplog.text


def test_metrics_average_latency_and_reset():
    stage_logger = InterviewChatLogger()
    stage_logger.log_latency(100.0)
    stage_logger.log_latency(300.0)
    stage_logger.log_tokens(40, 10)

    metrics = stage_logger.get_metrics()
    assert metrics["completions"] == 2
    assert metrics["avg_latency"] == 200.0
    assert metrics["total_tokens"] == 50

    stage_logger.reset()
    assert stage_logger.get_metrics()["completions"] == 0
    assert stage_logger.events == []

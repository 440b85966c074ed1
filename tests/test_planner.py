from study_metrics.planner import export_plan_csv, plan_progress, task_minutes


def sample_plan():
    return {
        "weekGoal": "Finish calculus unit",
        "schedule": [
            {
                "day": "Monday",
                "tasks": [
                    {"subject": "Math", "topic": "Limits", "duration": "45m", "difficulty": "Medium", "completed": True},
                    {"subject": "Physics", "topic": "Kinematics", "duration": "30m", "difficulty": "Hard"},
                ],
            },
            {
                "day": "Tuesday",
                "tasks": [
                    {"subject": "Math", "topic": "Derivatives", "duration": "60m", "difficulty": "Hard", "completed": True},
                ],
            },
            {"day": "Wednesday", "tasks": []},
        ],
    }


def test_task_minutes():
    assert task_minutes("45m") == 45
    assert task_minutes(" 90 mins") == 90
    assert task_minutes("1h") == 1
    assert task_minutes(20) == 20
    assert task_minutes("") == 30
    assert task_minutes(None) == 30
    assert task_minutes("0m") == 30
    assert task_minutes("soon") == 30


def test_plan_progress():
    assert plan_progress(sample_plan()) == {"completed": 2, "total": 3, "completion_rate": 67}


def test_plan_progress_empty():
    assert plan_progress({}) == {"completed": 0, "total": 0, "completion_rate": 0}


def test_export_plan_csv():
    assert export_plan_csv(sample_plan()) == (
        "Day,Subject,Topic,Duration,Difficulty,Status\n"
        'Monday,"Math","Limits",45m,Medium,Done\n'
        'Monday,"Physics","Kinematics",30m,Hard,Pending\n'
        'Tuesday,"Math","Derivatives",60m,Hard,Done\n'
    )

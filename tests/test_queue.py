from sehaty.schemas.queue import QueueItem
from sehaty.services.queue_display import advance, build_preview, find_position

def make_queue():
    return [
        QueueItem(id=1, patient_name="Ahmed Mohamed", time="9:00 AM", status="completed"),
        QueueItem(id=2, patient_name="Test User", time="10:00 AM", status="current", estimated_wait=0),
        QueueItem(id=3, patient_name="Mahmoud Ali", time="10:30 AM", status="waiting", estimated_wait=15),
        QueueItem(id=4, patient_name="Fatima Ahmed", time="11:00 AM", status="waiting", estimated_wait=45),
        QueueItem(id=5, patient_name="Omar Hassan", time="11:30 AM", status="waiting"),
    ]

class TestPreview:

    def test_positions_and_waits(self):
        people = build_preview(current_number=10, total_in_queue=3, estimated_wait_time=12)

        assert [p.position for p in people] == [10, 11, 12, 13]
        assert [p.estimated_wait_time for p in people] == [12, 7, 2, 0]
        assert people[-1].is_next_available
        assert people[-1].name == "You (Next)"

    def test_user_in_queue_suppresses_next_slot(self):
        people = build_preview(10, 3, 30, user_position=11)

        assert len(people) == 3
        assert [p.is_current_user for p in people] == [False, True, False]
        assert not any(p.is_next_available for p in people)

    def test_next_slot_can_be_hidden(self):
        people = build_preview(1, 2, 10, show_next_available=False)
        assert len(people) == 2

    def test_empty_queue(self):
        people = build_preview(5, 0, 20)
        assert len(people) == 1
        assert people[0].position == 5
        assert people[0].estimated_wait_time == 20

    def test_preview_endpoint(self, client):
        response = client.get("/api/queue/preview", params={
            "current_number": 4,
            "total_in_queue": 2,
            "estimated_wait_time": 20,
        })
        assert response.status_code == 200

        data = response.json()
        assert data["total_in_queue"] == 2
        assert [p["position"] for p in data["people"]] == [4, 5, 6]
        assert [p["estimated_wait_time"] for p in data["people"]] == [20, 15, 10]

    def test_preview_rejects_negative_numbers(self, client):
        response = client.get("/api/queue/preview", params={
            "current_number": 1,
            "total_in_queue": -1,
            "estimated_wait_time": 5,
        })
        assert response.status_code == 422

class TestAdvance:

    def test_promotes_next_and_reduces_waits(self):
        advanced = advance(make_queue())

        assert [item.status for item in advanced] == [
            "completed", "completed", "current", "waiting", "waiting"
        ]
        assert advanced[2].estimated_wait == 0
        assert advanced[3].estimated_wait == 30
        # Unknown estimates count as 30 minutes
        assert advanced[4].estimated_wait == 15

    def test_waits_floor_at_zero(self):
        queue = advance(advance(advance(make_queue())))
        assert queue[-1].status == "current"
        assert all((item.estimated_wait or 0) >= 0 for item in queue)

    def test_zero_wait_is_not_reset_to_default(self):
        queue = [
            QueueItem(id=1, patient_name="A", status="current", estimated_wait=0),
            QueueItem(id=2, patient_name="B", status="waiting", estimated_wait=0),
            QueueItem(id=3, patient_name="C", status="waiting", estimated_wait=0),
        ]
        assert advance(queue)[2].estimated_wait == 0

    def test_last_current_is_left_alone(self):
        queue = advance(advance(advance(make_queue())))
        assert advance(queue) == queue

    def test_without_current_nothing_changes(self):
        queue = [QueueItem(id=1, patient_name="A", status="waiting", estimated_wait=10)]
        assert advance(queue) == queue

    def test_input_not_mutated(self):
        queue = make_queue()
        advance(queue)
        assert queue[1].status == "current"

    def test_find_position(self):
        queue = make_queue()
        assert find_position(queue, "Test User").position == "current"
        assert find_position(queue, "Fatima Ahmed").position == 2
        assert find_position(queue, "Fatima Ahmed").wait == 45
        assert find_position(queue, "Ahmed Mohamed").position == "completed"
        assert find_position(queue, "Nobody") is None

    def test_advance_endpoint(self, client):
        response = client.post("/api/queue/advance", json={
            "queue": [item.model_dump() for item in make_queue()],
            "patient_name": "Fatima Ahmed"
        })
        assert response.status_code == 200

        data = response.json()
        assert data["queue"][2]["status"] == "current"
        assert data["position"] == {"position": 1, "wait": 30}

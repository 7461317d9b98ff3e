"""
Integration tests for the device session: config, heartbeat, commands, events and media.
"""
import pytest

pytestmark = pytest.mark.integration


class TestSnapshotScenario:

    def test_operator_command_reaches_device_once(self, client, authenticate):
        device_headers = authenticate("cam-1")
        operator_headers = authenticate("operator-1")

        created = client.post(
            "/api/v1/commands/cam-1",
            json={"commandType": "take_snapshot", "parameters": {"quality": "high"}, "priority": "high"},
            headers=operator_headers,
        )
        assert created.status_code == 201
        command = created.json()["data"]
        assert command["status"] == "queued"
        command_id = command["commandId"]

        heartbeat = client.post(
            "/api/v1/heartbeat",
            json={"timestamp": "2025-06-01T12:00:00Z", "location": {"lat": 52.5, "lng": 13.4}},
            headers=device_headers,
        )
        assert heartbeat.status_code == 200
        data = heartbeat.json()["data"]
        assert data["commands"] == [
            {"id": command_id, "type": "take_snapshot", "parameters": {"quality": "high"}}
        ]
        assert data["configUpdateAvailable"] is False
        assert "serverTime" in data

        again = client.post("/api/v1/heartbeat", json={}, headers=device_headers)
        assert again.json()["data"]["commands"] == []

        status = client.get(f"/api/v1/commands/{command_id}/status", headers=operator_headers)
        assert status.json()["data"]["status"] == "sent"
        assert status.json()["data"]["sentAt"] is not None

        result = client.post(
            f"/api/v1/commands/{command_id}/result",
            json={"success": True, "result": {"url": "media/cam-1/snap.jpg"}},
            headers=device_headers,
        )
        assert result.status_code == 200
        assert result.json()["data"] == {"commandId": command_id, "status": "completed"}

        final = client.get(f"/api/v1/commands/{command_id}/status", headers=operator_headers).json()["data"]
        assert final["status"] == "completed"
        assert final["result"] == {"url": "media/cam-1/snap.jpg"}
        assert final["executedAt"] is not None

    def test_result_from_other_device_is_not_found(self, client, authenticate):
        device_headers = authenticate("cam-1")
        other_headers = authenticate("cam-2")
        command_id = client.post(
            "/api/v1/commands/cam-1", json={"commandType": "upload_logs"}, headers=other_headers
        ).json()["data"]["commandId"]
        client.post("/api/v1/heartbeat", json={}, headers=device_headers)

        response = client.post(
            f"/api/v1/commands/{command_id}/result", json={"success": True}, headers=other_headers
        )
        assert response.status_code == 404

    def test_result_before_delivery_is_invalid_state(self, client, authenticate):
        headers = authenticate("cam-1")
        command_id = client.post(
            "/api/v1/commands/cam-1", json={"commandType": "take_snapshot"}, headers=headers
        ).json()["data"]["commandId"]

        response = client.post(f"/api/v1/commands/{command_id}/result", json={"success": True}, headers=headers)
        assert response.status_code == 409
        assert response.json()["error"]["code"] == "INVALID_STATE"

    def test_unknown_command_type(self, client, authenticate):
        response = client.post(
            "/api/v1/commands/cam-1", json={"commandType": "self_destruct"}, headers=authenticate("cam-1")
        )
        assert response.status_code == 400
        assert response.json()["error"]["code"] == "VALIDATION_ERROR"

    def test_unknown_command_status(self, client, authenticate):
        response = client.get("/api/v1/commands/missing/status", headers=authenticate("cam-1"))
        assert response.status_code == 404
        assert response.json()["error"] == {"code": "NOT_FOUND", "message": "Command not found"}


class TestConfigEndpoints:

    def test_get_and_merge(self, client, authenticate):
        headers = authenticate("cam-1")
        current = client.get("/api/v1/config", headers=headers).json()["data"]
        assert current["deviceConfig"]["deviceId"] == "cam-1"
        assert current["deviceConfig"]["segmentLengthSeconds"] == 120

        response = client.put(
            "/api/v1/config",
            json={"deviceConfig": {"segmentLengthSeconds": 60, "audioRecordingEnabled": False}},
            headers=headers,
        )
        assert response.status_code == 200
        body = response.json()
        assert body["message"] == "Configuration updated successfully"
        assert body["data"]["configVersion"] == 2

        merged = client.get("/api/v1/config", headers=headers).json()["data"]["deviceConfig"]
        assert merged["segmentLengthSeconds"] == 60
        assert merged["audioRecordingEnabled"] is False
        assert merged["preEventSeconds"] == 10

    def test_empty_merge_rejected(self, client, authenticate):
        response = client.put("/api/v1/config", json={"deviceConfig": {}}, headers=authenticate("cam-1"))
        assert response.status_code == 400
        assert response.json()["error"]["code"] == "VALIDATION_ERROR"


class TestEventEndpoint:

    def test_high_severity_event(self, client, authenticate):
        response = client.post(
            "/api/v1/events",
            json={
                "eventType": "collision",
                "timestamp": "2025-06-01T12:00:00Z",
                "severity": 0.95,
                "speed": 88,
            },
            headers=authenticate("cam-1"),
        )
        assert response.status_code == 201
        data = response.json()["data"]
        assert data["acknowledged"] is True
        assert data["processingStatus"] == "queued"
        assert data["actions"] == [
            {"type": "notify_emergency_contact", "parameters": {"contactId": "emergency-contact-123"}}
        ]

    def test_event_without_timestamp(self, client, authenticate):
        response = client.post(
            "/api/v1/events", json={"eventType": "collision"}, headers=authenticate("cam-1")
        )
        assert response.status_code == 400

    def test_malformed_timestamp(self, client, authenticate):
        response = client.post(
            "/api/v1/events",
            json={"eventType": "collision", "timestamp": "yesterday"},
            headers=authenticate("cam-1"),
        )
        assert response.status_code == 400
        assert response.json()["error"]["code"] == "VALIDATION_ERROR"


class TestMediaEndpoints:

    def test_register_and_status(self, client, authenticate):
        headers = authenticate("cam-1")
        response = client.post(
            "/api/v1/media",
            json={
                "fileName": "clip.mp4",
                "storageUrl": "media/cam-1/clip.mp4",
                "fileSize": 1048576,
                "mimeType": "video/mp4",
                "duration": 120.0,
            },
            headers=headers,
        )
        assert response.status_code == 201
        data = response.json()["data"]
        assert data["uploadUrl"] == "http://testserver/media/cam-1/clip.mp4"
        assert data["mimeType"] == "video/mp4"

        status = client.get(f"/api/v1/media/{data['fileId']}/status", headers=headers)
        assert status.status_code == 200
        assert status.json()["data"]["uploadStatus"] == "completed"

    def test_unknown_media(self, client, authenticate):
        response = client.get("/api/v1/media/missing/status", headers=authenticate("cam-1"))
        assert response.status_code == 404

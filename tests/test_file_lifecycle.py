"""End-to-end behaviour against the fake DocMan server."""

import pytest

from docman_client.schemas import NIL_UUID, File


@pytest.fixture
def new_file():
    return File(fh_claim_number="FH-0001", name="scan.pdf", file_type="pdf", modified_by="jdoe")


class TestInsertAndFetch:
    @pytest.mark.asyncio
    async def test_insert_assigns_identifier(self, services, new_file):
        resp = await services.files.insert(new_file)
        assert resp.is_success
        assert resp.content != NIL_UUID

        fetched = await services.files.get(resp.content)
        assert fetched.is_success
        assert fetched.content == new_file.model_copy(update={"id": resp.content})

    @pytest.mark.asyncio
    async def test_update_is_visible(self, services, new_file):
        file_id = (await services.files.insert(new_file)).content
        renamed = new_file.model_copy(update={"id": file_id, "name": "renamed.pdf"})

        assert (await services.files.update(renamed)).is_success
        assert (await services.files.get(file_id)).content.name == "renamed.pdf"

    @pytest.mark.asyncio
    async def test_virtual_path(self, services, new_file):
        file_id = (await services.files.insert(new_file)).content
        resp = await services.files.get_virtual_path(file_id)
        assert resp.content == "/FH-0001/scan.pdf"


class TestDeletion:
    @pytest.mark.asyncio
    async def test_soft_delete_keeps_record(self, services, new_file):
        file_id = (await services.files.insert(new_file)).content

        assert (await services.files.delete(file_id)).is_success

        active = await services.files.get_all()
        everything = await services.files.get_all(deleted=True)
        assert file_id not in {f.id for f in active.content}
        restored = [f for f in everything.content if f.id == file_id]
        assert len(restored) == 1 and restored[0].deleted is True

    @pytest.mark.asyncio
    async def test_physical_delete_removes_record(self, services, new_file):
        file_id = (await services.files.insert(new_file)).content

        assert (await services.files.delete_physical(file_id)).is_success

        everything = await services.files.get_all(deleted=True)
        assert file_id not in {f.id for f in everything.content}
        missing = await services.files.get(file_id)
        assert missing.is_success is False
        assert missing.status_code == 404


class TestHeartbeat:
    @pytest.mark.asyncio
    async def test_heartbeat(self, services):
        server_time = await services.heartbeat.get_server_time()
        connection = await services.heartbeat.get_connection_string_name()
        assert server_time.content.year == 2026
        assert connection.content == "DocManPrimary"

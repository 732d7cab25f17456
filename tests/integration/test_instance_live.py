"""Live checks against a real instance (FEDI_BASE / FEDI_TOKEN)."""

import pytest

from laakhay.fedi import ClientError, Instance


@pytest.mark.asyncio
async def test_instance_info(client):
    """Test instance metadata decodes."""
    info = await client.instance()
    assert isinstance(info, Instance)
    assert info.uri


@pytest.mark.asyncio
async def test_verify_credentials(client):
    """Test the token resolves to an account."""
    me = await client.verify_credentials()
    assert me.id


@pytest.mark.asyncio
async def test_home_timeline_pages(client):
    """Test the first two pages of the home timeline."""
    page = await client.get_home_timeline()
    seen = 0
    async for status in page.items_iter():
        assert status.id
        seen += 1
        if seen >= 60:
            break


@pytest.mark.asyncio
async def test_unknown_status_is_client_error(client):
    with pytest.raises(ClientError):
        await client.get_status("0")

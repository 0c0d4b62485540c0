# tests/test_assignment_store.py

"""
Tests for the Supabase-backed building assignment lookup.
"""

from unittest.mock import Mock, patch

from core.assignment_store import get_assigned_building_ids


def test_returns_assigned_ids():
    with patch("core.assignment_store.get_supabase_client") as mock_supabase:
        mock_client = Mock()
        mock_query = Mock()
        mock_query.eq.return_value = mock_query
        mock_query.execute.return_value = Mock(data=[
            {"building_id": "b1"},
            {"building_id": "b2"},
        ])
        mock_client.table.return_value.select.return_value = mock_query
        mock_supabase.return_value = mock_client

        assert get_assigned_building_ids("user-1") == ["b1", "b2"]
        mock_query.eq.assert_called_with("user_id", "user-1")


def test_no_user_id_means_no_assignments():
    with patch("core.assignment_store.get_supabase_client") as mock_supabase:
        assert get_assigned_building_ids(None) == []
        mock_supabase.assert_not_called()


def test_unconfigured_store_means_no_assignments():
    with patch("core.assignment_store.get_supabase_client", return_value=None):
        assert get_assigned_building_ids("user-1") == []


def test_store_failure_means_no_assignments():
    with patch("core.assignment_store.get_supabase_client") as mock_supabase:
        mock_client = Mock()
        mock_client.table.side_effect = Exception("connection refused")
        mock_supabase.return_value = mock_client

        assert get_assigned_building_ids("user-1") == []

"""
Unit Tests for chess_bot

Running Tests:
    # Run all tests
    pytest tests/

    # Run specific test file
    pytest tests/test_search.py

    # Run specific test
    pytest tests/test_search.py::TestFindBestMove::test_depth_one_matches_static_argmax

Dependencies:
    - pytest: Test framework
"""

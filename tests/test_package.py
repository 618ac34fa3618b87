import mapiter


def test_public_api_is_exported():
    for name in mapiter.__all__:
        assert hasattr(mapiter, name)


def test_helpers_compose():
    scores = {"ana": 3, "ben": 8, "cy": 5, "dee": 10}
    passing = mapiter.filter(scores, lambda value, key, _: value >= 5)
    labelled = mapiter.map_keys(passing, lambda value, key, _: key.upper())
    total = mapiter.reduce(labelled, lambda acc, value, key, _: acc + value, 0)

    assert list(labelled) == ["BEN", "CY", "DEE"]
    assert total == 23
    assert mapiter.join(labelled, "|") == "8|5|10"
    assert mapiter.key_of(scores, 10) == "dee"

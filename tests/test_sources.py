from types import SimpleNamespace

import pytest

from eventiter.sources import EmitterCapability, SourceCapability, TargetCapability


def test_source_capability_is_abstract():
    with pytest.raises(TypeError):
        SourceCapability()


def test_emitter_capability_round_trip(emitter, on_only_emitter):
    capability = EmitterCapability()
    seen = []

    def listener(*args):
        seen.append(args)

    for source in (emitter, on_only_emitter):
        capability.subscribe(source, "foo", listener)
        assert source.listener_count("foo") == 1
        source.emit("foo", 1, 2)
        capability.unsubscribe(source, "foo", listener)
        assert source.listener_count("foo") == 0

    assert seen == [(1, 2), (1, 2)]


def test_emitter_capability_extracts_variadic_arguments():
    capability = EmitterCapability()
    assert capability.extract_args("a", 1, None) == ["a", 1, None]
    assert capability.extract_args() == []
    err = ValueError("x")
    assert capability.extract_error(err, "extra") is err


def test_emitter_capability_supports():
    capability = EmitterCapability()
    assert capability.supports(SimpleNamespace(on=lambda *a: None, remove_listener=lambda *a: None))
    assert not capability.supports(SimpleNamespace(on=lambda *a: None))
    assert not capability.supports(SimpleNamespace(remove_listener=lambda *a: None))


def test_target_capability_wraps_single_event(target, make_event):
    capability = TargetCapability()
    event = make_event("tick")
    assert capability.extract_args(event) == [event]
    assert capability.supports(target)
    assert not capability.supports(object())


def test_target_capability_extracts_error(make_event):
    capability = TargetCapability()
    err = RuntimeError("boom")
    assert capability.extract_error(make_event("error", error=err)) is err
    assert capability.extract_error(err) is err
    bare = make_event("error")
    assert capability.extract_error(bare) is bare


def test_repr():
    assert repr(TargetCapability()) == "TargetCapability()"

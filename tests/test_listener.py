from settingskit.listener import SettingListener
from settingskit.options import SignalArgs, Source
from settingskit.settingdata import Signal


class FakeSetting:
    def __init__(self):
        self.value = 0
        self.signal = Signal()

    def set(self, value):
        self.value = value
        self.signal.invoke(value, SignalArgs(source=Source.SETTER))

    def connect_simple(self, callback, auto_invoke):
        connection = self.signal.connect(lambda _value, _args: callback())
        if auto_invoke:
            callback()
        return connection


class Counter:
    def __init__(self):
        self.count = 0

    def __call__(self):
        self.count += 1


def test_simple():
    a, b = FakeSetting(), FakeSetting()
    counter = Counter()
    listener = SettingListener(counter)

    assert counter.count == 0
    listener.add_setting(a)
    assert counter.count == 0
    listener.add_setting(b)
    assert counter.count == 0

    a.set(42)
    assert counter.count == 1
    b.set(42)
    assert counter.count == 2
    a.set(42)
    assert counter.count == 3
    a.set(1)
    assert counter.count == 4


def test_autoinvoke():
    a, b = FakeSetting(), FakeSetting()
    counter = Counter()
    listener = SettingListener(counter)

    listener.add_setting(a, True)
    assert counter.count == 1
    listener.add_setting(b)
    assert counter.count == 1

    a.set(42)
    assert counter.count == 2
    b.set(42)
    assert counter.count == 3
    a.set(42)
    assert counter.count == 4
    a.set(1)
    assert counter.count == 5


def test_manual_invoke():
    a, b = FakeSetting(), FakeSetting()
    counter = Counter()
    listener = SettingListener(counter)
    listener.add_setting(a)
    listener.add_setting(b)

    a.set(42)
    assert counter.count == 1
    listener.invoke()
    assert counter.count == 2
    b.set(42)
    assert counter.count == 3


def test_reset_callback():
    a, b = FakeSetting(), FakeSetting()
    counter = Counter()
    listener = SettingListener(counter)
    listener.add_setting(a)
    listener.add_setting(b)

    a.set(42)
    assert counter.count == 1
    listener.reset_callback()
    assert counter.count == 1
    b.set(42)
    a.set(42)
    listener.invoke()
    assert counter.count == 1


def test_empty_callback_then_set_callback():
    a, b = FakeSetting(), FakeSetting()
    listener = SettingListener()
    listener.add_setting(a)
    listener.add_setting(b)

    b.set(42)
    a.set(42)
    listener.invoke()
    listener.reset_callback()
    b.set(42)
    a.set(42)
    listener.invoke()
    assert a.value == 42

    counter = Counter()
    listener.set_callback(counter)
    a.set(1)
    assert counter.count == 1


def test_leaving_context_drops_connections():
    a = FakeSetting()
    counter = Counter()
    with SettingListener(counter) as listener:
        listener.add_setting(a)
        assert len(a.signal) == 1
        a.set(42)
    assert counter.count == 1
    assert len(a.signal) == 0
    a.set(1)
    assert counter.count == 1
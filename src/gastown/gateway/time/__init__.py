"""Time gateway.

Import from submodules:
- gastown.gateway.time.abc: Time (ABC)
- gastown.gateway.time.real: RealTime
- gastown.gateway.time.fake: FakeTime
"""

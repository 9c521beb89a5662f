from ._clock import Clock, FixedClock, SkewedClock, system_clock

__all__ = ["Clock", "FixedClock", "SkewedClock", "system_clock"]

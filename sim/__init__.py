"""Tick 기반 이벤트 발화 스케줄러"""
__version__ = "0.1.0-alpha"

"""
Report Modules (``report_modules``).

Report plugins built on ``report_kernel``.  Each report package reads
records through the ``TradingServer`` port (``report_modules.ports``),
formats them, and emits a UI document through the kernel's table builder
and serializer.
"""

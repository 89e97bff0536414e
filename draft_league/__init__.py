"""NBA Draft League - standings, schedule and live scoring backend."""

from utils.sampling import MAX_ANALYSIS_COLUMNS, analysis_column_limit, find_max_columns, sample_rows


def _grid(n_rows, n_cols=2):
    return [[f"r{r}c{c}" for c in range(n_cols)] for r in range(n_rows)]


class TestSampleRows:
    def test_small_sheet_is_unchanged(self):
        grid = _grid(50)
        rows, mapping = sample_rows(grid)
        assert rows == grid
        assert mapping == list(range(50))

    def test_empty_sheet(self):
        assert sample_rows([]) == ([], [])

    def test_large_sheet_is_bounded(self):
        grid = _grid(1000)
        rows, mapping = sample_rows(grid)
        assert len(rows) <= 45
        assert len(mapping) == len(rows)
        assert len(set(mapping)) == len(mapping)
        assert mapping == sorted(mapping)

    def test_large_sheet_keeps_head_stride_and_tail(self):
        rows, mapping = sample_rows(_grid(1000))
        assert mapping[:10] == list(range(10))
        assert mapping[10:13] == [10, 15, 20]
        assert mapping[-5:] == [995, 996, 997, 998, 999]
        # 10 head rows + 20 strided rows before the cap, then the tail.
        assert len(mapping) == 35

    def test_rows_match_their_mapping(self):
        grid = _grid(120)
        rows, mapping = sample_rows(grid)
        for sampled, original in zip(rows, mapping):
            assert sampled == grid[original]

    def test_just_over_threshold(self):
        rows, mapping = sample_rows(_grid(51))
        assert mapping == list(range(10)) + [10, 15, 20, 25, 30, 35, 40, 45] + [46, 47, 48, 49, 50]


class TestColumnLimit:
    def test_max_columns_ragged(self):
        assert find_max_columns([["a"], ["a", "b", "c"], []]) == 3
        assert find_max_columns([]) == 0

    def test_narrow_sheet(self):
        assert analysis_column_limit(_grid(3, 7)) == 7

    def test_wide_sheet_is_capped(self):
        grid = _grid(3, 5) + _grid(1, 35)
        assert analysis_column_limit(grid) == MAX_ANALYSIS_COLUMNS == 20

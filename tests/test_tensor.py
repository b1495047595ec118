import pytest

from syncdemos.tensor import arange_tensor, format_tensor, main, swap_last_two


def test_arange_tensor_shape_and_values():
    tensor = arange_tensor((2, 3, 4))
    assert len(tensor) == 2
    assert all(len(matrix) == 3 for matrix in tensor)
    assert all(len(row) == 4 for matrix in tensor for row in matrix)
    flat = [v for matrix in tensor for row in matrix for v in row]
    assert flat == list(range(2 * 3 * 4))


def test_arange_tensor_rejects_bad_shape():
    with pytest.raises(ValueError):
        arange_tensor(())
    with pytest.raises(ValueError):
        arange_tensor((2, -1))


def test_swap_last_two_moves_elements():
    tensor = arange_tensor((2, 3, 4))
    swapped = swap_last_two(tensor)
    assert len(swapped) == 2
    assert all(len(matrix) == 4 for matrix in swapped)
    assert all(len(row) == 3 for matrix in swapped for row in matrix)
    for i in range(2):
        for j in range(3):
            for k in range(4):
                assert swapped[i][k][j] == tensor[i][j][k]


def test_swap_twice_is_identity():
    tensor = arange_tensor((3, 2, 5))
    assert swap_last_two(swap_last_two(tensor)) == tensor


def test_swap_does_not_modify_input():
    tensor = arange_tensor((2, 3, 4))
    snapshot = [[list(row) for row in matrix] for matrix in tensor]
    swap_last_two(tensor)
    assert tensor == snapshot


def test_swap_two_dimensional():
    assert swap_last_two([[1, 2, 3], [4, 5, 6]]) == [[1, 4], [2, 5], [3, 6]]


def test_swap_rejects_vector():
    with pytest.raises(ValueError):
        swap_last_two([1, 2, 3])


def test_format_tensor_slices_and_footer():
    text = format_tensor(swap_last_two(arange_tensor((2, 3, 4))))
    lines = text.splitlines()
    assert lines[0] == "(1,.,.) = "
    assert "(2,.,.) = " in lines
    assert lines[-1] == "[ CPULongType{2,4,3} ]"
    row_lines = [line for line in lines if line.startswith("  ")]
    assert len(row_lines) == 8
    assert all(len(line.split()) == 3 for line in row_lines)


def test_format_tensor_rejects_scalar():
    with pytest.raises(ValueError):
        format_tensor(5)


def test_main_prints_both_tensors(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert out.startswith("Original tensor:\n")
    assert "After swapping dim 1 and 2:" in out
    assert "[ CPULongType{2,3,4} ]" in out
    assert "[ CPULongType{2,4,3} ]" in out
import pytest

from pizzametrics.orders import Order, parse_order_line, read_csv

HEADER = (
    "pizza_id,order_id,pizza_name_id,quantity,order_date,order_time,"
    "unit_price,total_price,pizza_size,pizza_category,pizza_ingredients,"
    "pizza_name\n"
)
LINE = (
    '1,1,hawaiian_m,1,1/1/2015,11:38:36,13.25,13.25,M,Classic,'
    '"Sliced Ham, Pineapple, Mozzarella Cheese",The Hawaiian Pizza\n'
)
LINE2 = (
    '2,2,classic_dlx_m,2,1/2/2015,11:57:40,16,32,M,Classic,'
    '"Pepperoni, Mushrooms, Red Onions",The Classic Deluxe Pizza\n'
)


def test_parse_fields():
    order = parse_order_line(LINE)
    assert order == Order(
        pizza_id=1,
        order_id=1,
        pizza_name="The Hawaiian Pizza",
        quantity=1,
        order_date="1/1/2015",
        order_time="11:38:36",
        unit_price=13.25,
        total_price=13.25,
        pizza_size="M",
        pizza_category="Classic",
        pizza_ingredients="Sliced Ham, Pineapple, Mozzarella Cheese",
    )


def test_parse_quoted_name_strips_quotes():
    line = LINE.replace("The Hawaiian Pizza", '"The Hawaiian Pizza"')
    assert parse_order_line(line).pizza_name == "The Hawaiian Pizza"


def test_parse_crlf_line_ending():
    order = parse_order_line(LINE.replace("\n", "\r\n"))
    assert order.pizza_name == "The Hawaiian Pizza"


def test_parse_without_quoted_ingredients():
    line = "1,1,x,2,d,t,1.5,3,L,Veggie,Plain Pizza\n"
    order = parse_order_line(line)
    assert order.pizza_ingredients == ""
    assert order.pizza_name == "Plain Pizza"
    assert order.quantity == 2
    assert order.pizza_size == "L"


def test_parse_lenient_numbers():
    line = "7x,8,x,3pcs,d,t,abc,2.5e1,S,Cat,\"a\",N\n"
    order = parse_order_line(line)
    assert order.pizza_id == 7
    assert order.quantity == 3
    assert order.unit_price == 0.0
    assert order.total_price == 25.0


def test_parse_missing_fields_raises():
    with pytest.raises(ValueError):
        parse_order_line("1,2,3\n")


def test_parse_unterminated_ingredients_raises():
    with pytest.raises(ValueError):
        parse_order_line('1,1,x,1,d,t,1,1,M,Classic,"Ham, Cheese\n')


def test_read_csv_skips_header(tmp_path):
    path = tmp_path / "orders.csv"
    path.write_text(HEADER + LINE + LINE2, encoding="utf-8")
    orders = read_csv(path)
    assert [o.order_id for o in orders] == [1, 2]
    assert orders[1].pizza_name == "The Classic Deluxe Pizza"


def test_read_csv_skips_blank_lines(tmp_path):
    path = tmp_path / "orders.csv"
    path.write_text(HEADER + LINE + "\n", encoding="utf-8")
    assert len(read_csv(path)) == 1


def test_read_csv_header_only(tmp_path):
    path = tmp_path / "orders.csv"
    path.write_text(HEADER, encoding="utf-8")
    assert read_csv(path) == []


def test_read_csv_missing_file(tmp_path):
    with pytest.raises(OSError):
        read_csv(tmp_path / "missing.csv")
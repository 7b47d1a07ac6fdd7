import gc

from xlbase.stock_factory import Stock, StockFactory


def test_same_key_shares_object():
    factory = StockFactory()
    a = factory.get_stock("IBM")
    b = factory.get_stock("IBM")
    assert a is b
    assert a.key == "IBM"


def test_different_keys_differ():
    factory = StockFactory()
    ibm = factory.get_stock("IBM")
    goog = factory.get_stock("GOOG")
    assert ibm is not goog
    assert factory.keys() == ["GOOG", "IBM"]


def test_released_stocks_forgotten():
    factory = StockFactory()
    ibm = factory.get_stock("IBM")
    goog = factory.get_stock("GOOG")
    del goog
    gc.collect()
    assert factory.keys() == ["IBM"]
    del ibm
    gc.collect()
    assert factory.keys() == []


def test_recreated_after_release():
    factory = StockFactory()
    factory.get_stock("IBM")
    gc.collect()
    again = factory.get_stock("IBM")
    assert isinstance(again, Stock)
    assert again.name == "IBM"
    assert factory.keys() == ["IBM"]


def test_stock_outlives_factory():
    factory = StockFactory()
    ibm = factory.get_stock("IBM")
    del factory
    gc.collect()
    assert ibm.key == "IBM"
    del ibm
    gc.collect()
from lessvfs.stores import register, VirtualFileStore, build_store, StoreError


@register('chain')
class ChainStore(VirtualFileStore):
    """
    Overlay of several stores. Lookups go through the stores in order, and the first store holding a path serves it.
    """
    def __init__(self, stores):
        """
        :param stores: Stores to check, in order.
        :type stores: list[VirtualFileStore]
        """
        self.stores = list(stores)

    @classmethod
    def from_config(cls, config, base_dir):
        stores = config.get('stores')
        if not isinstance(stores, list) or len(stores) == 0:
            raise StoreError('Chain store needs a non-empty \'stores\' list')
        return cls([build_store(store, base_dir) for store in stores])

    def exists(self, path):
        return any(store.exists(path) for store in self.stores)

    def open(self, path):
        for store in self.stores:
            if store.exists(path):
                return store.open(path)
        raise FileNotFoundError('Virtual file \'{0}\' does not exist in any chained store'.format(self.normalize(path)))

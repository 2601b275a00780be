
class LibraryAPIError(Exception): pass

class UserNotFoundError(LibraryAPIError): pass

class BookNotFoundError(LibraryAPIError): pass

class LoanNotFoundError(LibraryAPIError): pass

class BookAlreadyLoanedError(LibraryAPIError): pass

class InvalidUserError(LibraryAPIError): pass

class DatabaseInsertError(LibraryAPIError): pass

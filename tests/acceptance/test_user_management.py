from recruiting.models import USER_ROLE


class TestUserManagement:

    def test_create_and_delete_user(self, navigator, user_service):
        management_page = navigator.go_to_user_management_page()
        management_page.create_user("fernando", "f2pass", USER_ROLE)
        assert management_page.usernames() == ["fernando"]

        user_id = user_service.find_by_username("fernando").id
        details_page = management_page.user_details(user_id)
        assert details_page.get_username() == "fernando"

        management_page = details_page.click_on_delete_user_button()
        assert management_page.usernames() == []

    def test_new_user_can_log_in(self, navigator):
        navigator.go_to_user_management_page().create_user("fernando", "f2pass", USER_ROLE)
        navigator.log_out()
        navigator.go_to_login_page().login("fernando", "f2pass")
        assert navigator.go_to_user_management_page().usernames() == ["admin"]
